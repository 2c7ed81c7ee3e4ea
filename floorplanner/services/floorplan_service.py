"""High-level editing service: store + engine behind one facade."""

from __future__ import annotations
import logging
from typing import Literal

from floorplanner.models import (
    EngineParams, FloorplanScene, OpeningElement, OpeningKind, Point2D,
    WallElement, walls_of,
)
from floorplanner.core.engine import FloorplanEngine
from floorplanner.core import interaction
from floorplanner.core.interaction import Viewport
from floorplanner.services.demo import demo_floorplan
from floorplanner.services.store import FloorplanStore


logger = logging.getLogger(__name__)


class FloorplanService:
    """Turns pointer input (in screen space) into element mutations.

    Every mutation goes through the store, and `rebuild` always starts from
    the store's current snapshot.
    """

    def __init__(
        self,
        store: FloorplanStore | None = None,
        params: EngineParams | None = None,
    ) -> None:
        self.params = params or EngineParams()
        self.store = store or FloorplanStore()
        self.engine = FloorplanEngine(self.params)
        self.viewport = Viewport.from_params(self.params)

    @property
    def walls(self) -> list[WallElement]:
        return walls_of(self.store.elements)

    def rebuild(self) -> FloorplanScene:
        return self.engine.rebuild(self.store.elements)

    def pointer_to_world(self, screen: Point2D) -> Point2D:
        return self.viewport.screen_to_world(screen)

    def snap(self, screen: Point2D, exclude_id: str | None = None) -> Point2D:
        return interaction.resolve_pointer(
            self.pointer_to_world(screen), self.walls, self.params,
            self.viewport.zoom, exclude_id,
        )

    def draw_wall(self, screen_start: Point2D, screen_end: Point2D) -> WallElement | None:
        start = self.snap(screen_start)
        end = self.snap(screen_end)
        wall = interaction.create_wall(start, end, self.params)
        if wall is None:
            return None
        self.store.add(wall)
        logger.debug("Drew wall %s", wall.id)
        return wall

    def drag_wall_endpoint(
        self, wall_id: str, which: Literal["start", "end"], screen: Point2D,
    ) -> WallElement | None:
        wall = self.store.get(wall_id)
        if not isinstance(wall, WallElement):
            return None
        moved = interaction.move_wall_endpoint(
            wall, which, self.pointer_to_world(screen), self.walls,
            self.params, self.viewport.zoom,
        )
        if moved is None:
            return None
        self.store.update(wall_id, **{which: moved.start if which == "start" else moved.end})
        return moved

    def place_opening(self, kind: OpeningKind, screen: Point2D) -> OpeningElement | None:
        opening = interaction.create_opening(
            kind, self.pointer_to_world(screen), self.walls, self.params,
        )
        if opening is None:
            logger.debug("No wall near %s, %s not placed", screen, kind)
            return None
        self.store.add(opening)
        return opening

    def drag_opening(self, opening_id: str, screen: Point2D) -> OpeningElement | None:
        opening = self.store.get(opening_id)
        if not isinstance(opening, OpeningElement):
            return None
        moved = interaction.drag_opening(
            opening, self.pointer_to_world(screen), self.walls, self.params,
        )
        if moved is None:
            return None
        self.store.update(
            opening_id,
            parent_wall_id=moved.parent_wall_id,
            position_on_wall=moved.position_on_wall,
        )
        return moved

    def select_at(self, screen: Point2D):
        element = interaction.hit_test(
            self.pointer_to_world(screen), self.store.elements, self.params,
            self.viewport.zoom,
        )
        self.store.select(element.id if element is not None else None)
        return element

    def zoom_at(self, screen: Point2D, factor: float) -> None:
        self.viewport = self.viewport.zoom_at(screen, factor)

    def pan_by(self, dx: float, dy: float) -> None:
        self.viewport = self.viewport.pan_by(dx, dy)

    def load_demo(self) -> None:
        self.store.clear()
        self.store.replace(demo_floorplan())
