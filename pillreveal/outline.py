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
Defines the geometry providers which turn the progress of a reveal animation
into a :class:`~pillreveal.RenderTransform`. Three providers are included:

* :class:`PillReveal` grows a pill-shaped outline from a circle around a
  center point to a full rectangle.

* :class:`ZoomReveal` drives a :class:`PillReveal` and additionally scales the
  popup item's icon and translates its container so the icon appears to stay
  still while the pill grows around it.

* :class:`PillWidthReveal` narrows the full pill horizontally to a range
  around the icon, keeping the full height.
"""

import warnings

from .exc import RevealProgressRange
from .geometry import Point, Rect, Outline, RenderTransform


def _lerp(start, finish, progress):
    return start * (1 - progress) + finish * progress


class RevealProvider:
    """
    Abstract base class for geometry providers. Descendents must override
    :meth:`set_progress`.

    Providers hold only the parameters fixed at construction; calling
    :meth:`set_progress` with the same value always produces the same
    transform, regardless of the order of calls.
    """
    __slots__ = ()

    def set_progress(self, progress):
        """
        Return the :class:`~pillreveal.RenderTransform` for the given
        *progress* (between 0.0 and 1.0).
        """
        raise NotImplementedError

    @staticmethod
    def _check_progress(progress):
        if not 0 <= progress <= 1:
            warnings.warn(RevealProgressRange(
                'progress %g is outside the range [0, 1]' % progress))


class PillReveal(RevealProvider):
    """
    Reveals a pill-shaped outline growing from a circle of the given *radius*
    around *center* (a :class:`~pillreveal.Point` or (x, y) tuple) to the
    full *pill_rect*.

    Each edge of the outline moves linearly from the bounding square of the
    circle (clipped to *pill_rect*) to the matching edge of *pill_rect*. The
    outline's corner radius is *radius*, or half the outline's height if that
    is smaller. Hence at progress 0.0 the outline is the circle, and at
    progress 1.0 it is the full pill with corners of *radius*.
    """
    __slots__ = ('_center', '_pill_rect', '_radius', '_start')

    def __init__(self, center, pill_rect, radius):
        self._center = Point(*center)
        self._pill_rect = Rect(*pill_rect)
        self._radius = radius
        x, y = self._center
        pill = self._pill_rect
        self._start = Rect(
            max(pill.left, x - radius),
            max(pill.top, y - radius),
            min(pill.right, x + radius),
            min(pill.bottom, y + radius),
        )

    def __repr__(self):
        return 'PillReveal(center=%r, pill_rect=%r, radius=%g)' % (
            self._center, self._pill_rect, self._radius)

    @property
    def center(self):
        "The center of the starting circle"
        return self._center

    @property
    def pill_rect(self):
        "The rectangle the outline grows to fill"
        return self._pill_rect

    @property
    def radius(self):
        "The radius of the starting circle and the corners of the pill"
        return self._radius

    def outline(self, progress):
        """
        Return the :class:`~pillreveal.Outline` for the given *progress*.
        """
        left, top, right, bottom = (
            _lerp(start, finish, progress)
            for start, finish in zip(self._start, self._pill_rect)
        )
        return Outline(
            left, top, right, bottom, min(self._radius, (bottom - top) / 2))

    def set_progress(self, progress):
        self._check_progress(progress)
        return RenderTransform(self.outline(progress), None, Point(0, 0))


class ZoomReveal(RevealProvider):
    """
    Extension of :class:`PillReveal` which scales the icon with the progress
    of the reveal and translates the container to keep the icon anchored.

    The *pivot* (a :class:`~pillreveal.Point` or (x, y) tuple), *pill_rect*,
    and *radius* are passed to the underlying :class:`PillReveal`. If
    *is_container_above_icon* is ``True`` the container is translated
    downwards as the pill shrinks vertically (so it stays attached to the
    icon beneath it), otherwise upwards. The *pivot_left* parameter selects
    which end of the pill the icon is anchored to.

    For every progress value :meth:`set_progress` returns a transform with a
    *scale* equal to the progress itself and a *translation* such that
    ``translation.x + pivot_x(progress)`` is constant (equal to
    :attr:`translate_x`).
    """
    __slots__ = (
        '_pill',
        '_full_height',
        '_translate_y_multiplier',
        '_pivot_left',
        '_translate_x',
    )

    def __init__(self, pivot, pill_rect, radius, is_container_above_icon,
                 pivot_left):
        # pylint: disable=too-many-arguments
        self._pill = PillReveal(pivot, pill_rect, radius)
        pill_rect = self._pill.pill_rect
        self._full_height = pill_rect.height
        self._translate_y_multiplier = 0.5 if is_container_above_icon else -0.5
        self._pivot_left = bool(pivot_left)
        if self._pivot_left:
            self._translate_x = pill_rect.height / 2
        else:
            self._translate_x = pill_rect.right - pill_rect.height / 2

    def __repr__(self):
        return (
            'ZoomReveal(pivot=%r, pill_rect=%r, radius=%g, '
            'is_container_above_icon=%s, pivot_left=%s)' % (
                self._pill.center, self._pill.pill_rect, self._pill.radius,
                self._translate_y_multiplier > 0, self._pivot_left))

    @property
    def pill(self):
        "The underlying :class:`PillReveal`"
        return self._pill

    @property
    def translate_x(self):
        "The fixed horizontal position the pivot is anchored to"
        return self._translate_x

    @property
    def translate_y_multiplier(self):
        "+0.5 if the container is above the icon, -0.5 otherwise"
        return self._translate_y_multiplier

    @property
    def pivot_left(self):
        "``True`` if the pivot is anchored to the left end of the pill"
        return self._pivot_left

    def _pivot_x(self, outline):
        if self._pivot_left:
            return outline.left + outline.height / 2
        else:
            return outline.right - outline.height / 2

    def pivot_x(self, progress):
        """
        Return the horizontal position of the pivot within the outline at the
        given *progress* (before translation).
        """
        return self._pivot_x(self._pill.outline(progress))

    def set_progress(self, progress):
        self._check_progress(progress)
        outline = self._pill.outline(progress)
        translate_y = self._translate_y_multiplier * (
            self._full_height - outline.height)
        translate_x = self._translate_x - self._pivot_x(outline)
        return RenderTransform(
            outline, progress, Point(translate_x, translate_y))


class PillWidthReveal(RevealProvider):
    """
    Reveals the full *pill_rect* from a horizontal range of it, between *left*
    and *right*, keeping the full height throughout. The outline's corners
    are always half the pill's height (making it a pill, or a circle when the
    range is as wide as the pill is high).

    Played in reverse this collapses a popup item to the silhouette of its
    icon; the icon's scale and the container's position are untouched.
    """
    __slots__ = ('_pill_rect', '_start_left', '_start_right')

    def __init__(self, pill_rect, left, right):
        self._pill_rect = Rect(*pill_rect)
        self._start_left = left
        self._start_right = right

    def __repr__(self):
        return 'PillWidthReveal(pill_rect=%r, left=%g, right=%g)' % (
            self._pill_rect, self._start_left, self._start_right)

    @property
    def pill_rect(self):
        "The rectangle the outline widens to fill"
        return self._pill_rect

    def outline(self, progress):
        """
        Return the :class:`~pillreveal.Outline` for the given *progress*.
        """
        pill = self._pill_rect
        return Outline(
            _lerp(self._start_left, pill.left, progress),
            pill.top,
            _lerp(self._start_right, pill.right, progress),
            pill.bottom,
            pill.height / 2,
        )

    def set_progress(self, progress):
        self._check_progress(progress)
        return RenderTransform(self.outline(progress), None, Point(0, 0))
