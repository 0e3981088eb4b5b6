# vim: set et sw=4 sts=4 fileencoding=utf-8:
#
# Pill reveal animation geometry for popup items
# Copyright (c) 2016-2018 Dave Jones <dave@waveform.org.uk>
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#     * Redistributions of source code must retain the above copyright
#       notice, this list of conditions and the following disclaimer.
#     * Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#     * Neither the name of the copyright holder nor the
#       names of its contributors may be used to endorse or promote products
#       derived from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""
Defines the :class:`RevealSettings` class representing the configuration of
popup item reveal animations.
"""

import os
import logging
from configparser import ConfigParser, Error as ConfigParserError

from .exc import RevealSettingsError


logger = logging.getLogger(__name__)

DEFAULTS = {
    'radius': 8.0,
    'open_duration': 0.22,
    'close_duration': 0.15,
    'fps': 60,
}

_CONVERTERS = {
    'radius': float,
    'open_duration': float,
    'close_duration': float,
    'fps': int,
}


class RevealSettings:
    """
    Represents the configuration of popup item reveal animations.

    Values are taken from :data:`DEFAULTS`, then from the ``[reveal]``
    section of the INI-style *settings_file* (if given), then from any keyword
    arguments. If *settings_file* is ``None`` its default is taken from the
    ``PILLREVEAL_SETTINGS`` environment variable; if that is unset or empty, no
    file is read. For example:

    .. code-block:: ini

        [reveal]
        radius = 12
        open_duration = 0.3
        close_duration = 0.3
        fps = 30

    The recognized settings are:

    * *radius*: the corner radius (in pixels) of the popup item's pill, and
      the radius of the circle the reveal starts from

    * *open_duration*: the length (in seconds) of the open animation

    * *close_duration*: the length (in seconds) of a close animation which
      starts from a fully open item; closes which interrupt an open animation
      are shortened in proportion

    * *fps*: the default frame rate of :meth:`RevealAnimation.frames`

    A :exc:`RevealSettingsError` is raised if the file cannot be read, or if
    any value is unrecognized or invalid.
    """
    __slots__ = ('_values',)

    def __init__(self, settings_file=None, **overrides):
        if settings_file is None:
            settings_file = os.environ.get('PILLREVEAL_SETTINGS', '')
        values = DEFAULTS.copy()
        if settings_file:
            values.update(self._read(settings_file))
        for key, value in overrides.items():
            if key not in DEFAULTS:
                raise TypeError("unexpected keyword argument %r" % key)
            values[key] = value
        self._values = self._validate(values)

    def __repr__(self):
        return 'RevealSettings(%s)' % ', '.join(
            '%s=%r' % (key, self._values[key]) for key in sorted(self._values))

    @staticmethod
    def _read(settings_file):
        parser = ConfigParser()
        try:
            if not parser.read(settings_file):
                raise RevealSettingsError(
                    'unable to read settings file %s' % settings_file)
        except ConfigParserError as exc:
            raise RevealSettingsError(
                'invalid settings file %s: %s' % (settings_file, exc))
        logger.debug('Read settings from %s', settings_file)
        if not parser.has_section('reveal'):
            return {}
        result = {}
        for key, value in parser.items('reveal'):
            if key not in DEFAULTS:
                raise RevealSettingsError(
                    'unrecognized setting %s in %s' % (key, settings_file))
            result[key] = value
        return result

    @staticmethod
    def _validate(values):
        result = {}
        for key, value in values.items():
            try:
                result[key] = _CONVERTERS[key](value)
            except (TypeError, ValueError):
                raise RevealSettingsError(
                    'invalid value for %s: %r' % (key, value))
        if result['radius'] < 0:
            raise RevealSettingsError('radius must be zero or positive')
        if result['open_duration'] < 0 or result['close_duration'] < 0:
            raise RevealSettingsError('durations must be zero or positive')
        if result['fps'] <= 0:
            raise RevealSettingsError('fps must be positive')
        return result

    @property
    def radius(self):
        "The corner radius of the pill"
        return self._values['radius']

    @property
    def open_duration(self):
        "The length of the open animation in seconds"
        return self._values['open_duration']

    @property
    def close_duration(self):
        "The length of a close animation from a fully open item in seconds"
        return self._values['close_duration']

    @property
    def fps(self):
        "The default frame rate of generated animations"
        return self._values['fps']
