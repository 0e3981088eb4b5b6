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
The :mod:`pillreveal` module is the main namespace for the pillreveal package;
it imports (and exposes) all publically accessible classes, functions, and
constants from all the modules beneath it for convenience.

The package generates the parameters of a popup item's reveal animation: the
clip outline of a pill growing from a circle around the item's icon, the
scale of the icon, and the translation which keeps the icon anchored while
the pill grows. It performs no rendering and owns no frame clock; hosts
advance the :class:`RevealAnimation` handles they are given and apply the
resulting :class:`RenderTransform` to their own widgets. For example::

    >>> from pillreveal import *
    >>> item = PopupItem()
    >>> item.measure(200, 80)
    >>> anim = item.create_open_animation(True, False)
    >>> anim.update(0.5).scale
    0.5
    >>> item.is_open_or_opening()
    True
"""

import logging

from .exc import (
    RevealError,
    RevealSettingsError,
    RevealWarning,
    RevealEmptyRect,
    RevealProgressRange,
)
from .geometry import Point, Rect, Outline, RenderTransform, transform_dtype
from .easings import (
    linear,
    Curve,
    LinearCurve,
    LogAccelerateCurve,
    ResumableEaseCurve,
)
from .outline import RevealProvider, PillReveal, ZoomReveal, PillWidthReveal
from .anim import RevealAnimation
from .settings import RevealSettings
from .item import PopupItem


logging.getLogger(__name__).addHandler(logging.NullHandler())
