import pytest
import threading
import sdkwire

from sdkwire import dispatch
from sdkwire.protocol.fields import LIST, PATH, QUERY, HEADER, STRUCTURED


class Inner(sdkwire.Model):
    label = sdkwire.Field('label')


class EchoRequest(sdkwire.Model):
    id = sdkwire.Field('id', location=PATH)
    verbose = sdkwire.Field('verbose', location=QUERY, type=bool)
    token = sdkwire.Field('X-Token', location=HEADER)
    inner = sdkwire.Field('inner', kind=STRUCTURED, type=Inner)
    tags = sdkwire.Field('tags', kind=LIST)


class EchoResult(sdkwire.Model):
    echoed = sdkwire.Field('echoed')
    count = sdkwire.Field('count', type=int)


ECHO = sdkwire.Operation('Echo', EchoRequest, EchoResult, method='PUT', uri='/echo/{id}', target='Echo_1.Echo')
QUIET = sdkwire.Operation('Quiet', EchoRequest, method='DELETE', uri='/echo/{id}')


def test_marshall(transport, configuration):

    client = sdkwire.Client(transport, configuration=configuration)

    model = EchoRequest(id='abc', verbose=True, token='secret', inner=Inner(label='x'), tags=['a', 'b'])
    request = client.marshall(ECHO, model)

    assert request.method == 'PUT'
    assert request.target == 'Echo'
    assert request.render_uri() == '/echo/abc?verbose=true'
    assert request.headers['X-Token'] == 'secret'
    assert request.headers['X-Amz-Target'] == 'Echo_1.Echo'
    assert request.headers['User-Agent'] == 'sdkwire'
    assert request.payload == {'inner': {'label': 'x'}, 'tags': ['a', 'b']}

    # No target, no target header.

    request = client.marshall(QUIET, EchoRequest(id='abc'))
    assert 'X-Amz-Target' not in request.headers

    client.shutdown()


def test_marshall_wrong_model(transport, configuration):

    client = sdkwire.Client(transport, configuration=configuration)

    with pytest.raises(TypeError):
        client.marshall(ECHO, Inner(label='x'))

    with pytest.raises(sdkwire.MarshallingError):
        client.marshall(ECHO, None)

    client.shutdown()


def test_invoke(transport, configuration):

    transport.reply(body={'echoed': 'hello', 'count': 3, 'extra': 'ignored'})

    with sdkwire.Client(transport, configuration=configuration) as client:
        result = client.invoke(ECHO, EchoRequest(id='abc'))

    assert result == EchoResult(echoed='hello', count=3)
    assert len(transport.requests) == 1
    assert transport.timeouts == [configuration.timeout]
    assert transport.closed == True


def test_invoke_without_output(transport, configuration):

    with sdkwire.Client(transport, configuration=configuration) as client:
        assert client.invoke(QUIET, EchoRequest(id='abc')) is None


def test_service_error(transport, configuration):

    body = {'__type': 'com.example#ThrottlingException', 'message': 'slow down'}
    transport.reply(400, body)

    with sdkwire.Client(transport, configuration=configuration) as client:
        with pytest.raises(sdkwire.ServiceError) as raised:
            client.invoke(ECHO, EchoRequest(id='abc'))

    error = raised.value
    assert error.status == 400
    assert error.type == 'ThrottlingException'
    assert error.text == 'slow down'


def test_transport_errors_propagate(transport, configuration):

    failure = ConnectionError('unreachable')
    transport.responses.append(failure)

    with sdkwire.Client(transport, configuration=configuration) as client:
        with pytest.raises(ConnectionError) as raised:
            client.invoke(ECHO, EchoRequest(id='abc'))

    assert raised.value is failure


def test_invoke_async(transport, configuration):

    transport.reply(body={'echoed': 'later'})

    results = list()
    done = threading.Event()

    def success(result):
        results.append(result)
        done.set()

    with sdkwire.Client(transport, configuration=configuration) as client:
        handle = client.invoke_async(ECHO, EchoRequest(id='abc'), sdkwire.handler(success))
        assert handle.result(5) == EchoResult(echoed='later')
        assert done.wait(5)

    assert results == [EchoResult(echoed='later')]


def test_invoke_async_errors(transport, configuration):

    transport.reply(500, b'<html>internal error</html>')

    errors = list()
    done = threading.Event()

    def error(error):
        errors.append(error)
        done.set()

    with sdkwire.Client(transport, configuration=configuration) as client:

        handle = client.invoke_async(ECHO, EchoRequest(id='abc'), sdkwire.handler(error=error))

        with pytest.raises(sdkwire.ServiceError) as raised:
            handle.result(5)

        assert raised.value.type == 'HTTP500'
        assert done.wait(5)
        assert errors == [raised.value]

        # A model that cannot be marshalled is reported on the handle,
        # not raised by the submission.

        handle = client.invoke_async(ECHO, EchoRequest(id='abc', tags='not a list'))

        with pytest.raises(sdkwire.MarshallingError):
            handle.result(5)

        assert handle.state == dispatch.FAILED


def test_shared_dispatcher(transport, configuration):

    dispatcher = sdkwire.Dispatcher(max_workers=1)
    client = sdkwire.Client(transport, dispatcher, configuration)

    assert client.dispatcher is dispatcher

    client.shutdown()
    assert dispatcher.accepting == True
    assert transport.closed == True

    handle = dispatcher.submit(lambda: 'still running')
    assert handle.result(5) == 'still running'

    dispatcher.shutdown()


def test_owned_dispatcher_shutdown(transport, configuration):

    client = sdkwire.Client(transport, configuration=configuration)
    client.shutdown()

    assert client.dispatcher.accepting == False

    with pytest.raises(sdkwire.DispatcherShutdownError):
        client.invoke_async(ECHO, EchoRequest(id='abc'))


def test_endpoint(transport):

    configuration = sdkwire.config.Configuration(filename='/nonexistent/client.json', environ=dict(),
                                                 endpoint='https://service.example.com/', user_agent='tests/1.0')

    with sdkwire.Client(transport, configuration=configuration) as client:
        client.invoke(QUIET, EchoRequest(id='a b'))

    request = transport.requests[0]
    assert request.url() == 'https://service.example.com/echo/a%20b'
    assert request.headers['User-Agent'] == 'tests/1.0'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
