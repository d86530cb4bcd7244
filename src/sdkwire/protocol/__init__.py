from . import fields
from . import binding
from . import variant
from . import marshal
from . import codec
from . import request

from .binding import UNSET, Binding, Field, Model
from .variant import Enumerated, register


"""
sdkwire Protocol Layer
======================

This package maps typed request models onto wire requests. Nothing here
knows how a request is delivered; that is the business of the transport
handed to :class:`sdkwire.client.Client`.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Generated call site
    │
    ▼
Protocol Marshaller (marshal.py)
    Drives every field of a model, in declared order
    - marshall()
    - unmarshall()

    │
    ▼
Value Codec (codec.py)
    Renders one field at its wire location
    - scalars, enumerated variants, timestamps, blobs
    - nested structures, lists, maps

    │
    ▼
Binding Descriptors (binding.py)
    Immutable per-field metadata
    - Binding
    - Field
    - Model

    │
    ▼
Vocabulary (fields.py, variant.py)
    Canonical names for locations and kinds,
    closed enumerated types

---------------------------------------------------------------------

Below the Protocol Layer (for context)
--------------------------------------

Sink (request.py)
    Collects path, query, header, and payload writes
    Encodes the payload as JSON

Transport
    Moves bytes; supplied by the caller

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
