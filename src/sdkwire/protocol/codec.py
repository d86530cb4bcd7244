""" Conversion between typed in-memory values and their wire
    representation. :func:`write` realizes a single :class:`Binding` against
    a sink; :func:`read` is the inverse for values decoded from a JSON
    response payload.

    A sink is any object with two methods:

    ``set_at(location, name, value)``
        Write a rendered scalar at the given wire location.

    ``begin_structured(name)``
        Return a new sink scoped to a nested structure called *name* within
        the payload.
"""

from __future__ import annotations

import base64
import collections.abc
import datetime
from typing import Any

from . import marshal
from . import variant
from .binding import UNSET, Binding, Field, Model
from .fields import (
    LIST,
    MAP,
    PAYLOAD_ROOT,
    SCALAR,
    STRUCTURED,
    TIMESTAMP_FORMAT,
    flat_locations,
)


def write(value: Any, binding: Binding, sink) -> None:
    """ Write *value* to the *sink* as described by the *binding*. Nothing is
        written for an absent value; a None value is only written, as an
        explicit null, if the binding is nullable.
    """

    if value is UNSET:
        return

    if value is None:
        if binding.nullable:
            sink.set_at(binding.location, binding.name, None)
        return

    kind = binding.kind

    if kind == SCALAR:
        sink.set_at(binding.location, binding.name, render(value, binding.location))

    elif kind == STRUCTURED:
        root = binding.location == PAYLOAD_ROOT
        _write_structured(value, binding.name, sink, root)

    elif kind == LIST:
        if isinstance(value, (str, bytes, collections.abc.Mapping)):
            raise TypeError('%s: expected a sequence, got %s' % (binding.name, type(value).__name__))

        # Element order is significant; it is the order the service sees.

        for index, element in enumerate(value, 1):
            _write_member(element, binding, binding.element(index=index), sink)

    elif kind == MAP:
        if not isinstance(value, collections.abc.Mapping):
            raise TypeError('%s: expected a mapping, got %s' % (binding.name, type(value).__name__))

        for key, element in value.items():
            _write_member(element, binding, binding.element(key=key), sink)



def _write_member(element, binding, name, sink):

    if binding.member == STRUCTURED:
        _write_structured(element, name, sink)
    else:
        sink.set_at(binding.location, name, render(element, binding.location))



def _write_structured(model, name, sink, root=False):

    if not isinstance(model, Model):
        raise TypeError('%s: expected a Model instance, got %s' % (name, type(model).__name__))

    if root:
        # The nested model is the payload; no new scope is required.
        target = sink
    else:
        target = sink.begin_structured(name)

    marshal.marshall(model, target)



def render(value: Any, location: str) -> Any:
    """ Render a scalar *value* to its wire primitive. Path, query, and
        header locations always receive a string; payload locations receive
        JSON-compatible primitives.
    """

    if isinstance(value, variant.Enumerated):
        return value.to_wire()

    if isinstance(value, bool):
        if location in flat_locations:
            return 'true' if value else 'false'
        return value

    if isinstance(value, datetime.datetime):
        return format_timestamp(value)

    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode('ascii')

    if isinstance(value, (int, float)):
        if location in flat_locations:
            return str(value)
        return value

    if isinstance(value, str):
        return value

    raise TypeError('cannot render %s as a wire scalar' % (type(value).__name__,))



def format_timestamp(value: datetime.datetime) -> str:
    """ Render *value* in the fixed wire format. Naive timestamps are
        assumed to be UTC already.
    """

    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc)

    return value.strftime(TIMESTAMP_FORMAT) + '.%03dZ' % (value.microsecond // 1000)



def parse_timestamp(raw) -> datetime.datetime:
    """ Parse a timestamp in the fixed wire format, or as a number of
        seconds since the UNIX epoch. The result is always timezone-aware.
    """

    if isinstance(raw, bool):
        raise TypeError('a boolean is not a timestamp')

    if isinstance(raw, (int, float)):
        return datetime.datetime.fromtimestamp(raw, datetime.timezone.utc)

    text = str(raw)
    if text.endswith('Z'):
        text = text[:-1]

    parsed = datetime.datetime.fromisoformat(text)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)

    return parsed



def read(raw: Any, field: Field) -> Any:
    """ Convert a decoded JSON value back to the typed value described by
        the *field*.
    """

    if raw is None:
        return None

    binding = field.binding
    kind = binding.kind

    if kind == SCALAR:
        return parse(raw, field.type)

    if kind == STRUCTURED:
        return _read_structured(raw, field.type)

    if kind == LIST:
        if not isinstance(raw, list):
            raise TypeError('%s: expected a list, got %s' % (binding.name, type(raw).__name__))
        return [_read_member(element, field) for element in raw]

    if kind == MAP:
        if not isinstance(raw, dict):
            raise TypeError('%s: expected an object, got %s' % (binding.name, type(raw).__name__))
        return dict((key, _read_member(element, field)) for key, element in raw.items())



def _read_member(raw, field):

    if field.binding.member == STRUCTURED:
        return _read_structured(raw, field.type)

    return parse(raw, field.type)



def _read_structured(raw, model_type):

    if model_type is None:
        return raw

    return marshal.unmarshall(model_type, raw)



def parse(raw: Any, scalar_type) -> Any:
    """ Convert a wire primitive *raw* to an instance of *scalar_type*.
        A *scalar_type* of None returns the primitive unmodified.
    """

    if raw is None or scalar_type is None:
        return raw

    if issubclass(scalar_type, variant.Enumerated):
        return scalar_type.from_wire(raw)

    if scalar_type is datetime.datetime:
        return parse_timestamp(raw)

    if scalar_type is bytes:
        return base64.b64decode(raw)

    if scalar_type is bool:
        if isinstance(raw, bool):
            return raw
        if raw == 'true':
            return True
        if raw == 'false':
            return False
        raise ValueError('not a boolean: ' + repr(raw))

    if isinstance(raw, scalar_type):
        return raw

    return scalar_type(raw)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
