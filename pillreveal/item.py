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
Defines the :class:`PopupItem` class which tracks the open/close state of a
single popup item and creates its reveal animations.
"""

import logging
import warnings

from .exc import RevealEmptyRect
from .anim import RevealAnimation
from .easings import ResumableEaseCurve
from .geometry import Point, Rect
from .outline import ZoomReveal, PillWidthReveal
from .settings import RevealSettings


logger = logging.getLogger(__name__)


class PopupItem:
    """
    Represents a single item within a popup container, consisting of an icon
    (at one end) and content, clipped to a pill shaped background.

    The *settings* parameter is either a :class:`RevealSettings` instance, or
    the name of an INI-style settings file (see :class:`RevealSettings` for
    details); if unspecified, the default settings are used. If *rtl* is
    ``True`` the item is laid out right-to-left, placing the icon at the
    right end of the pill.

    The host must call :meth:`measure` with the item's size before creating
    any animations. Thereafter:

    * :meth:`create_open_animation` returns an animation that grows the pill
      from a circle around the icon, scaling the icon up with it.

    * :meth:`create_close_animation` returns the reverse animation, resuming
      from whatever point the open animation had reached.

    * :meth:`collapse_to_icon` returns an animation that narrows the pill to a
      circle around the icon.

    The item's :attr:`open_progress` is updated by the open and close
    animations as the host advances them, and :meth:`is_open_or_opening`
    reports whether the item is (even partially) open. Only the most recently
    created open or close animation affects the item's state.
    """
    __slots__ = (
        '_settings',
        '_width',
        '_height',
        '_pill_rect',
        '_open_progress',
        '_current',
        'rtl',
    )

    def __init__(self, settings=None, rtl=False):
        if not isinstance(settings, RevealSettings):
            settings = RevealSettings(settings)
        self._settings = settings
        self._width = 0
        self._height = 0
        self._pill_rect = Rect(0, 0, 0, 0)
        self._open_progress = 0.0
        self._current = None
        self.rtl = rtl

    def __repr__(self):
        return '<PopupItem size=%gx%g state=%s progress=%g>' % (
            self._width, self._height, self.state, self._open_progress)

    def close(self):
        """
        Call the :meth:`close` method to cancel any open or close animation
        still in progress, returning the item to the closed state. The method
        is idempotent (you can call it multiple times without error).
        """
        if self._current is not None:
            self._current.cancel()
            self._current = None
        self._open_progress = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        self.close()

    @property
    def settings(self):
        "The :class:`RevealSettings` used by the item"
        return self._settings

    @property
    def width(self):
        "The measured width of the item"
        return self._width

    @property
    def height(self):
        "The measured height of the item"
        return self._height

    @property
    def pill_rect(self):
        "The full bounds of the item's pill as a :class:`Rect`"
        return self._pill_rect

    @property
    def background_radius(self):
        "The corner radius of the item's pill"
        return self._settings.radius

    @property
    def open_progress(self):
        """
        How far (between 0.0 and 1.0) the item is open. This is 0.0 before any
        animation and rises with the open animation. It is held while a close
        animation plays and is reset to 0.0 when that close animation ends
        (or is cancelled).
        """
        return self._open_progress

    @property
    def state(self):
        """
        Returns one of the following strings describing the item's state:

        * ``'closed'``: the item is not open at all

        * ``'opening'``: the item is partially open

        * ``'open'``: the item is fully open

        * ``'closing'``: a close animation has been created and has not yet
          ended
        """
        if (
                self._current is not None and
                self._current.reverse and
                not self._current.finished):
            return 'closing'
        elif self._open_progress <= 0:
            return 'closed'
        elif self._open_progress >= 1:
            return 'open'
        else:
            return 'opening'

    def measure(self, width, height):
        """
        Record the measured *width* and *height* of the item. The item's pill
        becomes the rectangle from (0, 0) to (*width*, *height*).
        """
        self._width = width
        self._height = height
        self._pill_rect = Rect(0, 0, width, height)

    def icon_center(self):
        """
        Returns the position of the center of the icon relative to the item
        as a :class:`Point`. The icon is square, filling the height of the
        item at its start (the left end, or the right end if :attr:`rtl` is
        ``True``).
        """
        x = y = self._height / 2
        if self.rtl:
            x = self._width - x
        return Point(x, y)

    def is_open_or_opening(self):
        """
        Returns ``True`` if the item is open, or partially open.
        """
        return self._open_progress > 0

    def _check_measured(self):
        if self._pill_rect.empty:
            warnings.warn(RevealEmptyRect(
                'popup item has not been measured; reveal geometry is '
                'undefined'))

    def _zoom_reveal(self, is_container_above_icon, pivot_left):
        self._check_measured()
        return ZoomReveal(
            self.icon_center(), self._pill_rect, self.background_radius,
            is_container_above_icon, pivot_left)

    def create_open_animation(self, is_container_above_icon, pivot_left,
                              duration=None):
        """
        Returns a :class:`RevealAnimation` to play when the popup container is
        being opened.

        The *is_container_above_icon* and *pivot_left* parameters are passed to
        :class:`ZoomReveal`. The *duration* defaults to the
        :attr:`~RevealSettings.open_duration` setting.

        The item's :attr:`open_progress` is reset to 0.0 and then follows the
        animated fraction of the new animation as it is updated.
        """
        if duration is None:
            duration = self._settings.open_duration
        animation = RevealAnimation(
            self._zoom_reveal(is_container_above_icon, pivot_left),
            duration, fps=self._settings.fps)
        animation.add_update_listener(self._open_updated)
        self._current = animation
        self._open_progress = 0.0
        logger.debug('Created open animation for %r', self)
        return animation

    def create_close_animation(self, is_container_above_icon, pivot_left,
                               duration=None):
        """
        Returns a :class:`RevealAnimation` to play when the popup container is
        being closed.

        The *is_container_above_icon* and *pivot_left* parameters are passed to
        :class:`ZoomReveal`. The *duration* is that of a close from a fully
        open item and defaults to the :attr:`~RevealSettings.close_duration`
        setting; the animation's actual duration is scaled by the item's
        current :attr:`open_progress`, and its easing is a
        :class:`ResumableEaseCurve` so that the close starts exactly where
        the open animation stopped.

        The item's :attr:`open_progress` is left alone while the animation
        plays, so :meth:`is_open_or_opening` stays ``True`` until it ends.
        When the animation ends (or is cancelled) :attr:`open_progress` is
        reset to 0.0. If another close is requested before this one ends, the
        new close resumes from the reveal progress this one last reached.
        """
        if duration is None:
            duration = self._settings.close_duration
        progress = self._open_progress
        current = self._current
        if (
                current is not None and
                current.reverse and
                not current.finished and
                current.last_value is not None):
            progress = current.last_value
        animation = RevealAnimation(
            self._zoom_reveal(is_container_above_icon, pivot_left),
            duration * progress, easing=ResumableEaseCurve(progress),
            reverse=True, fps=self._settings.fps)
        animation.add_end_listener(self._close_ended)
        self._current = animation
        logger.debug(
            'Created close animation for %r (%gs)', self, animation.duration)
        return animation

    def collapse_to_icon(self, duration=None):
        """
        Returns a :class:`RevealAnimation` which clips the item to form a
        circle around the icon. The *duration* defaults to the
        :attr:`~RevealSettings.close_duration` setting. This animation does
        not affect the item's :attr:`open_progress`.
        """
        if duration is None:
            duration = self._settings.close_duration
        self._check_measured()
        half_height = self._height / 2
        icon_center_x = self.icon_center().x
        return RevealAnimation(
            PillWidthReveal(
                self._pill_rect,
                icon_center_x - half_height, icon_center_x + half_height),
            duration, reverse=True, fps=self._settings.fps)

    def _open_updated(self, animation):
        if animation is self._current:
            self._open_progress = animation.last_fraction

    def _close_ended(self, animation):
        if animation is self._current:
            self._open_progress = 0.0
            self._current = None
            logger.debug('Close animation ended for %r', self)
