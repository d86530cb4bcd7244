import pytest
import threading
import sdkwire

from sdkwire.protocol.request import Response


class RecordingTransport(sdkwire.Transport):
    """ Stand-in for a real transport: every request is recorded, and the
        queued responses are handed back in order. Once the queue is empty
        every further request receives an empty 200 response.
    """

    def __init__(self):
        self.requests = list()
        self.responses = list()
        self.timeouts = list()
        self.closed = False
        self.lock = threading.Lock()


    def reply(self, status=200, body=b'', headers=None):
        if not isinstance(body, (bytes, str)):
            body = sdkwire.json.dumps(body)
        self.responses.append(Response(status, headers, body))


    def invoke(self, request, timeout=None):

        with self.lock:
            self.requests.append(request)
            self.timeouts.append(timeout)

            if self.responses:
                response = self.responses.pop(0)
            else:
                response = Response(200)

        if isinstance(response, Exception):
            raise response

        return response


    def close(self):
        self.closed = True


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def configuration():
    return sdkwire.config.Configuration(filename='/nonexistent/client.json', environ=dict(), max_workers=2)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
