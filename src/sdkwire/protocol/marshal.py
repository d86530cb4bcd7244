""" The protocol marshaller: drive every :class:`Field` of a request model
    against a sink, in declared order, using :func:`codec.write` for each one.
    The marshaller keeps no state of its own; the binding tables it reads
    are immutable, so a single marshaller serves any number of concurrent
    callers.
"""

from __future__ import annotations

import collections.abc

from . import codec
from .binding import UNSET, Model
from .fields import PAYLOAD_FIELD, PAYLOAD_ROOT, STRUCTURED
from ..errors import MarshallingError


def marshall(model: Model, sink) -> None:
    """ Write every present field of *model* to the *sink*. An absent model
        is rejected before the sink is touched. The first field that fails
        to marshall aborts the whole operation; the resulting
        :class:`sdkwire.errors.MarshallingError` chains the original
        exception.
    """

    if model is None or model is UNSET:
        raise MarshallingError('invalid argument passed to marshall(): no request model')

    if not isinstance(model, Model):
        raise MarshallingError('invalid argument passed to marshall(): not a Model: ' + type(model).__name__)

    for field in type(model).fields:
        try:
            value = field.__get__(model)
            codec.write(value, field.binding, sink)
        except Exception as e:
            error = "unable to marshall %s.%s: %s" % (type(model).__name__, field.attribute, e)
            raise MarshallingError(error, field.attribute) from e



def unmarshall(model_type, payload):
    """ Build an instance of *model_type* from a decoded JSON *payload*.
        Only payload bindings are considered; keys in the *payload* that do
        not correspond to a field are ignored, and fields missing from the
        *payload* are left unset.
    """

    if not isinstance(payload, collections.abc.Mapping):
        raise MarshallingError('cannot unmarshall %s from %s' % (model_type.__name__, type(payload).__name__))

    instance = model_type()

    for field in model_type.fields:
        binding = field.binding

        if binding.location == PAYLOAD_ROOT and binding.kind == STRUCTURED:
            raw = payload
        elif binding.location == PAYLOAD_FIELD:
            try:
                raw = payload[binding.name]
            except KeyError:
                continue
        else:
            continue

        try:
            value = codec.read(raw, field)
        except Exception as e:
            error = "unable to unmarshall %s.%s: %s" % (model_type.__name__, field.attribute, e)
            raise MarshallingError(error, field.attribute) from e

        setattr(instance, field.attribute, value)

    return instance


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
