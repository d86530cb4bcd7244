""" Closed, string-backed vocabularies. An enumerated type is declared once,
    as a subclass of :class:`Enumerated`, and registered with
    :func:`register`; registration builds the exact-match lookup table used
    by :func:`from_wire`. Lookups never fall back to a default variant::

        @variant.register
        class Distribution(variant.Enumerated):
            RANDOM = 'Random'
            BY_LOG_STREAM = 'ByLogStream'

        Distribution.from_wire('Random')        # Distribution.RANDOM
        Distribution.RANDOM.to_wire()           # 'Random'
"""

import enum
import threading

from ..errors import ConfigurationError, UnknownVariantError


_tables = dict()
_tables_lock = threading.Lock()


class Enumerated(enum.Enum):
    """ Base class for all enumerated types. The value of each member is
        its canonical wire string.
    """

    @classmethod
    def from_wire(cls, value):
        return from_wire(cls, value)


    def to_wire(self):
        return to_wire(self)


    def __str__(self):
        return self.value


# end of class Enumerated



def register(enumerated):
    """ Build and store the lookup table for the *enumerated* type, which
        must be a subclass of :class:`Enumerated`. Every member must have a
        non-empty string value, and no two members may share a wire string.
        Returns the type unmodified so that this function can be used as a
        class decorator.
    """

    if not isinstance(enumerated, type) or not issubclass(enumerated, Enumerated):
        raise ConfigurationError('not an Enumerated type: ' + repr(enumerated))

    table = dict()

    # Iterating over __members__ instead of the class itself includes
    # aliases, which is how a duplicated wire string would show up.

    for name, member in enumerated.__members__.items():
        wire = member.value

        if not isinstance(wire, str) or wire == '':
            raise ConfigurationError('%s.%s: wire value must be a non-empty string' % (enumerated.__name__, name))

        if wire in table:
            raise ConfigurationError('%s.%s: duplicate wire value %r' % (enumerated.__name__, name, wire))

        table[wire] = member

    if len(table) == 0:
        raise ConfigurationError(enumerated.__name__ + ': no variants declared')

    with _tables_lock:
        _tables[enumerated] = table

    return enumerated



def registered(enumerated):
    """ Return True if the *enumerated* type has been registered.
    """

    return enumerated in _tables



def from_wire(enumerated, value):
    """ Return the variant of *enumerated* whose wire string is exactly
        *value*. Raises :class:`sdkwire.errors.UnknownVariantError` if the
        *value* is None, empty, or not a declared wire string.
    """

    try:
        table = _tables[enumerated]
    except KeyError:
        raise ConfigurationError('enumerated type not registered: ' + enumerated.__name__)

    if value is None or value == '':
        raise UnknownVariantError(enumerated, value)

    try:
        return table[value]
    except (KeyError, TypeError):
        raise UnknownVariantError(enumerated, value) from None



def to_wire(variant):
    """ Return the canonical wire string for the *variant*.
    """

    return variant.value


def wire_values(enumerated):
    """ Return the declared wire strings of *enumerated*, in declaration
        order.
    """

    return tuple(_tables[enumerated].keys())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
