""" A class representation of a wire request, which doubles as the
    reference sink for :func:`sdkwire.protocol.marshal.marshall`, and of the
    response handed back by a transport.
"""

import itertools
import threading
import urllib.parse

from .. import json
from .binding import ElementName
from .fields import HEADER, PATH, PAYLOAD_FIELD, PAYLOAD_ROOT, QUERY, payload_locations


class Request:
    """ The :class:`Request` collects everything the marshaller writes for
        one operation invocation: path parameters to substitute into the
        *uri* template, query parameters (in the order they were written),
        headers, and the JSON payload. Payload fields land in nested
        dictionaries and lists; a scalar written to the payload root replaces
        the JSON payload entirely, as the raw request body.

        The fields are largely in order of how they are represented on the
        wire: the HTTP *method*, the *uri* template, and the *target*
        operation name. The identification number is automatically
        generated, and is unique within this process.

        :ivar path: Path parameters, by wire name. List values are joined
                    with commas, as are list values in the headers.
        :ivar query: A list of (name, value) tuples.
        :ivar headers: Request headers, by wire name.
        :ivar payload: The JSON payload, as a dictionary.
        :ivar body: The raw request body, if a scalar was written to the
                    payload root.
    """

    def __init__(self, method='POST', uri='/', target=None, endpoint=None):

        self.id = _id_next()
        self.method = method
        self.uri = uri
        self.target = target
        self.endpoint = endpoint

        self.path = dict()
        self.query = list()
        self.headers = dict()
        self.payload = dict()
        self.body = None

        self._encapsulated = None


    def __repr__(self):
        return 'Request(%s %s, id=%s, payload=%r)' % (self.method, self.uri, self.id, self.payload)


    def set_at(self, location, name, value):

        self._encapsulated = None

        if location == PATH:
            _join(self.path, name, value)
        elif location == QUERY:
            self.query.append((name, value))
        elif location == HEADER:
            _join(self.headers, name, value)
        elif location == PAYLOAD_ROOT:
            self.body = value
        elif location == PAYLOAD_FIELD:
            _store(self.payload, name, value)
        else:
            raise ValueError('invalid location: ' + repr(location))


    def begin_structured(self, name):
        self._encapsulated = None
        return Structure(self, _scope(self.payload, name))


    def render_uri(self):
        """ Substitute the path parameters into the *uri* template and append
            the query string, if any. A ``{name}`` placeholder is fully
            percent-encoded; a greedy ``{name+}`` placeholder keeps any
            slashes in the value intact.
        """

        uri = self.uri

        for name, value in self.path.items():
            greedy = '{' + name + '+}'
            simple = '{' + name + '}'

            if greedy in uri:
                uri = uri.replace(greedy, urllib.parse.quote(value, safe='/'))
            elif simple in uri:
                uri = uri.replace(simple, urllib.parse.quote(value, safe=''))
            else:
                raise ValueError('path parameter not in URI template %r: %s' % (self.uri, name))

        if '{' in uri:
            raise ValueError('unresolved path parameter in URI: ' + uri)

        if self.query:
            uri = uri + '?' + urllib.parse.urlencode(self.query)

        return uri


    def url(self):
        """ Return the full URL: the *endpoint*, if any, followed by the
            rendered URI.
        """

        uri = self.render_uri()

        if self.endpoint is None:
            return uri

        return self.endpoint.rstrip('/') + uri


    def encapsulate(self):
        """ Return the request body as bytes: the raw body if one was set,
            otherwise the JSON encoding of the payload. Calling this method
            multiple times will return the cached encapsulation rather than
            generate it anew; any further writes clear the cache.
        """

        if self._encapsulated is not None:
            return self._encapsulated

        body = self.body

        if body is None:
            encapsulated = json.dumps(self.payload)
        elif isinstance(body, str):
            encapsulated = body.encode()
        else:
            encapsulated = bytes(body)

        self._encapsulated = encapsulated
        return encapsulated


# end of class Request



class Structure:
    """ A sink scoped to one nested structure within a :class:`Request`
        payload. Only payload locations are meaningful here.
    """

    def __init__(self, request, container):
        self.request = request
        self.container = container


    def set_at(self, location, name, value):

        if location not in payload_locations:
            raise ValueError('nested structures only hold payload fields, not ' + str(location))

        self.request._encapsulated = None
        _store(self.container, name, value)


    def begin_structured(self, name):
        return Structure(self.request, _scope(self.container, name))


# end of class Structure



class Response:
    """ What a transport hands back for a single :class:`Request`: the HTTP
        *status*, the response *headers*, and the raw response *body*.
    """

    def __init__(self, status, headers=None, body=b''):

        if headers is None:
            headers = dict()

        self.status = int(status)
        self.headers = headers
        self.body = body


    def __repr__(self):
        return 'Response(%d, %r)' % (self.status, self.body)


    @property
    def ok(self):
        return 200 <= self.status < 300


    def payload(self):
        """ Return the decoded JSON body; an empty body decodes as an empty
            dictionary.
        """

        body = self.body

        if body is None or body == b'' or body == '':
            return dict()

        return json.loads(body)


    def error(self):
        """ Return the (type, text) pair describing an error response. The
            type is taken from the ``__type`` field of the body, with any
            namespace prefix removed; the text from ``message``.
        """

        # Error bodies are not always JSON; the status code is still a
        # usable description in that case.

        try:
            payload = self.payload()
        except Exception:
            payload = dict()

        if not isinstance(payload, dict):
            payload = dict()

        type = payload.get('__type') or self.headers.get('x-amzn-ErrorType')
        text = payload.get('message') or payload.get('Message')

        if type:
            type = type.split('#')[-1].split(':')[0]
        else:
            type = 'HTTP%d' % (self.status)

        return type, text


# end of class Response



def _store(container, name, value):
    """ Store a single *value* in a payload *container*. Element names are
        folded into lists or dictionaries under their base name; list
        elements are appended, preserving the order in which they arrive.
    """

    if isinstance(name, ElementName):
        if name.index is not None:
            container.setdefault(name.base, list()).append(value)
        else:
            container.setdefault(name.base, dict())[name.key] = value
    else:
        container[name] = value



def _join(container, name, value):
    """ Store a single path or header *value*. List elements are joined,
        in order, into one comma-separated value under their base name.
    """

    if isinstance(name, ElementName):
        if name.index is None:
            raise ValueError('%s: maps cannot be written to a path or header' % (name.base))

        try:
            previous = container[name.base]
        except KeyError:
            container[name.base] = value
        else:
            container[name.base] = previous + ',' + value
    else:
        container[name] = value



def _scope(container, name):

    nested = dict()
    _store(container, name, nested)
    return nested



_id_min = 0
_id_max = 0xFFFFFFFF
_id_lock = threading.Lock()
_id_ticker = itertools.count(_id_min)


def _id_next():
    """ Return the next request identification number.
    """

    global _id_ticker

    with _id_lock:
        id = next(_id_ticker)

        if id >= _id_max:
            _id_ticker = itertools.count(_id_min)

    return '%08x' % (id)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
