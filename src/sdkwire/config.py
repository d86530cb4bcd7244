""" Client configuration. Settings are resolved, in increasing order of
    precedence, from the built-in defaults, the ``client.json`` file in the
    configuration directory, ``SDKWIRE_*`` environment variables, and any
    keyword arguments handed directly to :class:`Configuration`.
"""

import os

from . import json
from .errors import ConfigurationError


defaults = dict()
defaults['endpoint'] = None
defaults['max_workers'] = None
defaults['timeout'] = 60.0
defaults['user_agent'] = 'sdkwire'
defaults['log_json'] = False
defaults['verbose'] = False

_untruths = set(('', '0', 'false', 'f', 'no', 'n', 'off'))


class Configuration:
    """ A convenience class to represent client configuration. To first
        order an instance acts like a read-only object with one attribute
        per setting; :func:`as_dict` returns the full set.

        :ivar endpoint: Base URL for the remote service, if any.
        :ivar max_workers: Worker thread count for the dispatcher; None
                           selects the :mod:`concurrent.futures` default.
        :ivar timeout: Seconds a synchronous caller waits on a result.
        :ivar user_agent: Value of the User-Agent header on every request.
        :ivar log_json: Emit log records as JSON lines.
        :ivar verbose: Enable debug logging for sdkwire.
    """

    def __init__(self, filename=None, environ=None, **overrides):

        unknown = set(overrides) - set(defaults)
        if unknown:
            raise ConfigurationError('unknown settings: ' + ', '.join(sorted(unknown)))

        if environ is None:
            environ = os.environ

        settings = dict(defaults)
        settings.update(load(filename))

        for name in defaults:
            variable = 'SDKWIRE_' + name.upper()
            try:
                settings[name] = environ[variable]
            except KeyError:
                pass

        settings.update(overrides)

        self._settings = normalize(settings)


    def __getattr__(self, name):

        try:
            return self.__dict__['_settings'][name]
        except KeyError:
            raise AttributeError(name) from None


    def __repr__(self):
        return 'Configuration(%r)' % (self._settings,)


    def as_dict(self):
        return dict(self._settings)


# end of class Configuration



def normalize(settings):
    """ Convert raw *settings*, which may be strings from the environment,
        to their proper types. Raises
        :class:`sdkwire.errors.ConfigurationError` for anything that cannot
        be converted.
    """

    normalized = dict()

    for name, value in settings.items():
        try:
            value = _convert(name, value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError('invalid value for %s: %r' % (name, value)) from e

        normalized[name] = value

    max_workers = normalized['max_workers']
    if max_workers is not None and max_workers < 1:
        raise ConfigurationError('max_workers must be at least 1, not %d' % (max_workers))

    timeout = normalized['timeout']
    if timeout is not None and timeout <= 0:
        raise ConfigurationError('timeout must be positive, not %s' % (timeout))

    return normalized



def _convert(name, value):

    if name == 'max_workers':
        if value is None or value == '':
            return None
        return int(value)

    if name == 'timeout':
        if value is None or value == '':
            return None
        return float(value)

    if name in ('log_json', 'verbose'):
        if isinstance(value, str):
            return value.strip().lower() not in _untruths
        return bool(value)

    if value == '':
        return None

    return value



def load(filename=None):
    """ Load settings from *filename*, which defaults to ``client.json`` in
        the configuration :func:`directory`. A missing file is the same as
        an empty one.
    """

    if filename is None:
        filename = os.path.join(directory(), 'client.json')

    try:
        with open(filename, 'rb') as reader:
            raw_json = reader.read()
    except FileNotFoundError:
        return dict()

    try:
        loaded = json.loads(raw_json)
    except Exception as e:
        raise ConfigurationError('cannot parse %s: %s' % (filename, e)) from e

    if not isinstance(loaded, dict):
        raise ConfigurationError('expected a JSON object in ' + filename)

    unknown = set(loaded) - set(defaults)
    if unknown:
        raise ConfigurationError('unknown settings in %s: %s' % (filename, ', '.join(sorted(unknown))))

    return loaded



def directory(default=None):
    """ Return the directory location where we should be loading
        configuration files. This defaults to ``$HOME/.sdkwire``, but can be
        overridden by calling this method with a valid path, or by setting
        the ``SDKWIRE_HOME`` environment variable. Note that changes to the
        environment variable will be ignored unless it is set prior to the
        first invocation of this method.
    """

    if default is not None:
        default = str(default)
        default = os.path.expandvars(default)

        if os.path.isabs(default):
            pass
        else:
            raise ValueError('the default directory must be an absolute path')

        os.environ['SDKWIRE_HOME'] = default
        directory.found = default


    found = directory.found

    if found is not None:
        return found

    try:
        found = os.environ['SDKWIRE_HOME']
    except KeyError:
        pass
    else:
        directory.found = found
        return found

    try:
        home = os.environ['HOME']
    except KeyError:
        raise RuntimeError('SDKWIRE_HOME and HOME environment variables not set, cannot determine sdkwire configuration directory')

    found = os.path.join(home, '.sdkwire')

    directory.found = found
    return found

directory.found = None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
