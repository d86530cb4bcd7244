""" Declarative description of where each field of a request model lands
    on the wire. A :class:`Binding` is the immutable descriptor for a single
    field; :class:`Field` attaches a binding to an attribute of a
    :class:`Model` subclass, and the ordered set of fields on that subclass
    is the table consumed by :mod:`sdkwire.protocol.marshal`.

    A model definition looks like this::

        class StepStatus(binding.Model):
            state = binding.Field('State', type=StepState)
            timeline = binding.Field('Timeline', kind=STRUCTURED, type=StepTimeline)
"""

from __future__ import annotations

import dataclasses
from typing import Any, Optional

from . import fields
from .fields import MAP, PAYLOAD_FIELD, PAYLOAD_ROOT, SCALAR, STRUCTURED
from ..errors import ConfigurationError


class _Unset:
    """ Marker for a field that was never supplied. There is exactly one
        instance, :data:`UNSET`.
    """

    def __repr__(self):
        return 'UNSET'

    def __bool__(self):
        return False

    def __reduce__(self):
        return 'UNSET'


UNSET = _Unset()


@dataclasses.dataclass(frozen=True)
class Binding:
    """ Wire placement and value kind for one field. Invalid combinations
        raise :class:`sdkwire.errors.ConfigurationError` upon construction;
        path, query, and header slots only accept values that can be
        rendered as a single string. A list at a path or header slot is
        sent as one comma-separated value, so maps are refused there. The
        payload root holds one scalar body or one structure, never a
        collection.

        :ivar name: The wire name of the field.
        :ivar location: One of the locations in :mod:`fields`.
        :ivar kind: One of SCALAR, STRUCTURED, LIST, or MAP.
        :ivar member: The kind of each element for LIST and MAP bindings.
        :ivar nullable: Write an explicit null for a None payload value.
    """

    name: str
    location: str = PAYLOAD_FIELD
    kind: str = SCALAR
    member: str = SCALAR
    nullable: bool = False

    def __post_init__(self):

        if not isinstance(self.name, str) or self.name == '':
            raise ConfigurationError('binding wire name must be a non-empty string')

        if self.location not in fields.locations:
            raise ConfigurationError('%s: invalid location: %r' % (self.name, self.location))

        if self.kind not in fields.kinds:
            raise ConfigurationError('%s: invalid value kind: %r' % (self.name, self.kind))

        if self.member not in fields.member_kinds:
            raise ConfigurationError('%s: invalid member kind: %r' % (self.name, self.member))

        if self.location in fields.flat_locations and self.structured:
            raise ConfigurationError("%s: %s bindings cannot hold structured values" % (self.name, self.location))

        if self.kind == MAP and self.location in fields.joined_locations:
            raise ConfigurationError("%s: %s bindings cannot hold maps" % (self.name, self.location))

        if self.kind in fields.collection_kinds and self.location == PAYLOAD_ROOT:
            raise ConfigurationError("%s: the payload root cannot hold a %s" % (self.name, self.kind.lower()))

        if self.nullable and self.location not in fields.payload_locations:
            raise ConfigurationError('%s: only payload bindings can be nullable' % (self.name,))


    @property
    def structured(self):
        """ True if this binding, or any element it contains, is a nested
            structure.
        """

        if self.kind == STRUCTURED:
            return True

        if self.kind in fields.collection_kinds and self.member == STRUCTURED:
            return True

        return False


    def element(self, index=None, key=None):
        """ Return the qualified :class:`ElementName` for one member of a
            LIST (by 1-based *index*) or MAP (by *key*) binding.
        """

        return ElementName(self.name, index=index, key=key)


# end of class Binding



class ElementName(str):
    """ The wire name of a single list or map element: ``Name.1`` or
        ``Name.key``. It is a plain string to any sink that does not care
        about the distinction; sinks that do can inspect :attr:`base`,
        :attr:`index`, and :attr:`key`.
    """

    def __new__(cls, base, index=None, key=None):

        if index is None and key is None:
            raise ValueError('an element name requires an index or a key')

        if index is not None:
            text = '%s.%d' % (base, index)
        else:
            text = '%s.%s' % (base, key)

        self = str.__new__(cls, text)
        self.base = base
        self.index = index
        self.key = key
        return self


# end of class ElementName



class Field:
    """ Attach a :class:`Binding` to an attribute of a :class:`Model`.
        The positional and keyword arguments, other than *type*, are handed
        directly to :class:`Binding`.

        The *type* is only needed to read values back from the wire: a
        :class:`Model` subclass for structured values, an enumerated type,
        :class:`datetime.datetime`, or :class:`bytes`. Values of any other
        scalar type are read as-is.
    """

    def __init__(self, name, location=PAYLOAD_FIELD, kind=SCALAR, member=SCALAR,
                 nullable=False, type: Optional[type] = None):

        self.binding = Binding(name, location, kind, member, nullable)
        self.type = type
        self.attribute = None


    def __set_name__(self, owner, attribute):
        self.attribute = attribute


    def __get__(self, instance, owner=None):

        if instance is None:
            return self

        return instance.__dict__.get(self.attribute, UNSET)


    def __set__(self, instance, value):
        instance.__dict__[self.attribute] = value


    def __delete__(self, instance):
        instance.__dict__.pop(self.attribute, None)


    def __repr__(self):
        return 'Field(%r -> %r)' % (self.attribute, self.binding)


# end of class Field



class Model:
    """ Base class for request and response models. Subclasses declare their
        wire layout as :class:`Field` class attributes; the declaration order
        is the order in which fields are marshalled. Fields declared on a
        parent class come first; a subclass that declares a field with the
        same attribute name replaces the parent's field in its original
        position. The attribute name ``fields`` is reserved.

        Instances are plain data holders: keyword arguments to the
        constructor populate fields by attribute name, and any field not
        supplied reads back as :data:`UNSET`.
    """

    fields: tuple = ()

    def __init_subclass__(cls, **kwargs):

        super().__init_subclass__(**kwargs)

        if isinstance(cls.__dict__.get('fields'), Field):
            raise ConfigurationError(cls.__name__ + ': "fields" is reserved and cannot name a field')

        declared = list(cls.fields)
        positions = dict((field.attribute, index) for index, field in enumerate(declared))

        for value in cls.__dict__.values():
            if not isinstance(value, Field):
                continue

            try:
                index = positions[value.attribute]
            except KeyError:
                declared.append(value)
            else:
                declared[index] = value

        cls.fields = tuple(declared)


    def __init__(self, **kwargs):

        known = set(field.attribute for field in self.fields)

        for attribute, value in kwargs.items():
            if attribute not in known:
                raise TypeError('%s has no field %r' % (type(self).__name__, attribute))
            setattr(self, attribute, value)


    def __eq__(self, other):

        if type(other) is not type(self):
            return NotImplemented

        for field in self.fields:
            mine = getattr(self, field.attribute)
            theirs = getattr(other, field.attribute)
            if mine is not theirs and mine != theirs:
                return False

        return True


    def __repr__(self):

        present = list()
        for field in self.fields:
            value = getattr(self, field.attribute)
            if value is not UNSET:
                present.append('%s=%r' % (field.attribute, value))

        return '%s(%s)' % (type(self).__name__, ', '.join(present))


    def items(self):
        """ Iterate over (:class:`Field`, value) pairs for every field, in
            declared order, including unset fields.
        """

        for field in type(self).fields:
            yield field, field.__get__(self)


# end of class Model


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
