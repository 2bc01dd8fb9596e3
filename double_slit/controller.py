"""
Resize / invalidation controller.

Owns the render buffer and decides when a new frame is needed. Any change of
parameters or viewport size invalidates the current frame; triggers that
arrive while a render is running are coalesced into one follow-up render with
the newest inputs, and a frame whose inputs went stale mid-render is dropped.
"""
import logging
import threading
from typing import Callable, Optional

import numpy as np

from double_slit.optics import OpticalParameters
from double_slit.render import ViewportSize, render_frame

logger = logging.getLogger(__name__)

Surface = Callable[[np.ndarray, OpticalParameters, ViewportSize], None]


class RenderController:
    """
    idle -> rendering -> idle.

    ``surface(frame, params, size)`` receives every committed frame. The frame
    is a copy, so the surface may keep it after the next render starts.
    """

    def __init__(self, surface: Surface, renderer: Callable = render_frame, radiometric_falloff: bool = False):
        self._surface = surface
        self._renderer = renderer
        self._lock = threading.Lock()

        self._params: Optional[OpticalParameters] = None
        self._size: Optional[ViewportSize] = None
        self._radiometric_falloff = radiometric_falloff
        self._generation = 0
        self._dirty = False
        self._rendering = False
        self._buffer: Optional[np.ndarray] = None
        # inputs and generation of the frame currently being rendered
        self._in_flight = None
        self._in_flight_generation = 0

        self.last_committed = None
        self.frames_rendered = 0
        self.frames_committed = 0

    @property
    def is_rendering(self) -> bool:
        return self._rendering

    # ---------------- Triggers ----------------
    def set_parameters(self, params: OpticalParameters) -> bool:
        return self._invalidate(params=params)

    def resize(self, size: ViewportSize) -> bool:
        return self._invalidate(size=size)

    def set_radiometric_falloff(self, enabled: bool) -> bool:
        return self._invalidate(radiometric_falloff=bool(enabled))

    def update(self, params: OpticalParameters, size: ViewportSize, radiometric_falloff: Optional[bool] = None) -> bool:
        """Set the inputs at once. Returns True if this call performed the render."""
        return self._invalidate(params=params, size=size, radiometric_falloff=radiometric_falloff)

    def _inputs(self):
        return self._params, self._size, self._radiometric_falloff

    def _invalidate(self, params=None, size=None, radiometric_falloff=None) -> bool:
        with self._lock:
            if params is not None:
                self._params = params
            if size is not None:
                self._size = size
            if radiometric_falloff is not None:
                self._radiometric_falloff = radiometric_falloff
            if self._params is None or self._size is None:
                return False
            if not self._rendering and self._inputs() == self.last_committed:
                return False
            if self._rendering and self._inputs() == self._in_flight:
                # the frame being rendered already matches the latest inputs
                self._generation = self._in_flight_generation
                self._dirty = False
                return False
            self._generation += 1
            self._dirty = True
            if self._rendering:
                # the running render loop picks up the newest inputs
                logger.debug(f"Render in progress, coalescing generation {self._generation}")
                return False
            self._rendering = True
        self._drain()
        return True

    # ---------------- Render loop ----------------
    def _drain(self) -> None:
        try:
            while True:
                with self._lock:
                    if not self._dirty:
                        self._rendering = False
                        self._in_flight = None
                        return
                    self._dirty = False
                    generation = self._generation
                    params, size, falloff = self._inputs()
                    self._in_flight = (params, size, falloff)
                    self._in_flight_generation = generation

                frame = self._renderer(params, size, out=self._buffer, radiometric_falloff=falloff)
                self._buffer = frame
                self.frames_rendered += 1

                with self._lock:
                    if generation != self._generation:
                        logger.debug(f"Discarding stale frame (generation {generation})")
                        continue
                    self.last_committed = (params, size, falloff)
                self.frames_committed += 1
                # outside the lock: the surface may trigger a new invalidation
                self._surface(frame.copy(), params, size)
        except Exception:
            with self._lock:
                self._rendering = False
                self._in_flight = None
            logger.exception("Render failed")
            raise
