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
Defines the :class:`Rect`, :class:`Point`, :class:`Outline`, and
:class:`RenderTransform` tuples which carry geometry between the providers,
the animations, and the host, along with the :data:`transform_dtype` used
when sampling many frames at once.
"""

from collections import namedtuple

import numpy as np


transform_dtype = np.dtype([  # pylint: disable=invalid-name
    ('progress', np.float32),
    ('scale', np.float32),
    ('tx', np.float32),
    ('ty', np.float32),
    ('left', np.float32),
    ('top', np.float32),
    ('right', np.float32),
    ('bottom', np.float32),
    ('radius', np.float32),
])


class Point(namedtuple('Point', ('x', 'y'))):
    """
    A :func:`~collections.namedtuple` representing a two-dimensional point
    (or offset) with *x* and *y* components. Used for the icon center of a
    :class:`~pillreveal.PopupItem` and for the translation of a
    :class:`RenderTransform`.
    """
    __slots__ = ()
    def __repr__(self):
        return 'Point(x=%g, y=%g)' % self


class Rect(namedtuple('Rect', ('left', 'top', 'right', 'bottom'))):
    """
    A :func:`~collections.namedtuple` representing an axis-aligned rectangle
    by its *left*, *top*, *right*, and *bottom* edges. The right and bottom
    edges are exclusive, hence a rectangle from (0, 0) to (200, 80) is 200
    units wide and 80 units high.
    """
    __slots__ = ()
    def __repr__(self):
        return 'Rect(left=%g, top=%g, right=%g, bottom=%g)' % self

    @property
    def width(self):
        "The horizontal extent of the rectangle"
        return self.right - self.left

    @property
    def height(self):
        "The vertical extent of the rectangle"
        return self.bottom - self.top

    @property
    def empty(self):
        """
        Returns ``True`` if the rectangle has no area (zero or negative width
        or height).
        """
        return self.left >= self.right or self.top >= self.bottom


class Outline(namedtuple('Outline', ('left', 'top', 'right', 'bottom', 'radius'))):
    """
    A :func:`~collections.namedtuple` representing the clip outline of a
    reveal animation: a rounded rectangle with the edges *left*, *top*,
    *right*, and *bottom*, and corners of the given *radius*. When the radius
    is half the height, the outline is a "pill"; when additionally the width
    equals the height, it is a circle.
    """
    __slots__ = ()
    def __repr__(self):
        return (
            'Outline(left=%g, top=%g, right=%g, bottom=%g, radius=%g)' % self)

    @property
    def rect(self):
        "The bounds of the outline as a :class:`Rect`"
        return Rect(self.left, self.top, self.right, self.bottom)

    @property
    def width(self):
        "The horizontal extent of the outline"
        return self.right - self.left

    @property
    def height(self):
        "The vertical extent of the outline"
        return self.bottom - self.top


class RenderTransform(namedtuple('RenderTransform', (
        'outline', 'scale', 'translation'))):
    """
    A :func:`~collections.namedtuple` representing everything a host needs
    to draw a single frame of a reveal animation. The fields are as follows:

    .. attribute:: outline

        An :class:`Outline` that the popup item's content should be clipped
        to.

    .. attribute:: scale

        The scale (on both axes) to apply to the item's icon, or ``None`` if
        the icon's scale should be left alone.

    .. attribute:: translation

        A :class:`Point` giving the offset to apply to the item's container.
    """
    __slots__ = ()

    def to_record(self, progress):
        """
        Returns the transform as a tuple suitable for assignment to an element
        of an array of :data:`transform_dtype`. The *progress* the transform
        was generated for is stored alongside it. A *scale* of ``None`` is
        stored as NaN.
        """
        o = self.outline
        return (
            progress,
            np.nan if self.scale is None else self.scale,
            self.translation.x, self.translation.y,
            o.left, o.top, o.right, o.bottom, o.radius,
        )
