"""
Tessel Scene Graph
==================

Scene objects are small dataclasses that know how to ``update`` themselves
each frame and ``render`` into a drawing context. ``Scene`` hosts an ordered
list of children and forwards both calls to them in insertion order;
``View`` offsets a single child.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from tessel.errors import SceneError
from tessel.graphics.context import DrawContext
from tessel.graphics.geometry import Rect, Vector2, includes_all


class Renderable:
    """Anything that can draw itself into a rectangle of a context."""

    def render(self, ctx: DrawContext, rect: Rect) -> None:
        pass


class Taggable:
    """
    Tagging support. The host class must provide a ``tags`` list of strings.
    """

    tags: List[str]

    def tag(self, *tags: str) -> None:
        self.tags.extend(tags)

    def untag(self, *tags: str) -> None:
        self.tags = [t for t in self.tags if t not in tags]

    def tagged(self, *tags: str) -> bool:
        """True if the object carries every one of ``tags``."""
        return includes_all(self.tags, tags)


@dataclass(eq=False)
class BaseObject(Renderable, Taggable):
    tags: List[str] = field(default_factory=list)
    visible: bool = True

    def update(self, delta: float) -> None:
        pass

    def children(self) -> Iterator["BaseObject"]:
        return iter(())


@dataclass(eq=False)
class View(BaseObject):
    """Renders ``child`` with its rectangle moved by ``offset``."""

    offset: Vector2 = field(default_factory=Vector2.zero)
    child: Optional[BaseObject] = None

    def update(self, delta: float) -> None:
        if self.child is not None:
            self.child.update(delta)

    def render_content(self, ctx: DrawContext, rect: Rect) -> None:
        if self.child is not None and self.child.visible:
            self.child.render(ctx, rect)

    def render(self, ctx: DrawContext, rect: Rect) -> None:
        self.render_content(ctx, rect.translate(self.offset))

    def children(self) -> Iterator[BaseObject]:
        if self.child is not None:
            yield self.child


@dataclass(eq=False)
class Scene(BaseObject):
    """Ordered container of scene objects."""

    _children: List[BaseObject] = field(default_factory=list, init=False, repr=False)

    def add(self, obj: BaseObject) -> "Scene":
        self._children.append(obj)
        return self

    def delete(self, obj: BaseObject) -> BaseObject:
        """
        Remove ``obj`` from this scene.

        Raises:
            SceneError: If ``obj`` is not a direct child
        """
        for index, child in enumerate(self._children):
            if child is obj:
                del self._children[index]
                return obj
        raise SceneError(f"{type(obj).__name__} is not part of this scene")

    def update(self, delta: float) -> "Scene":
        for child in list(self._children):
            child.update(delta)
        return self

    def render(self, ctx: DrawContext, rect: Rect) -> "Scene":
        for child in list(self._children):
            if child.visible:
                child.render(ctx, rect)
        return self

    def children(self) -> Iterator[BaseObject]:
        return iter(list(self._children))

    def walk(self) -> Iterator[BaseObject]:
        """Depth-first iteration over every descendant."""
        return _walk(self)

    def find(self, *tags: str) -> Iterator[BaseObject]:
        """Descendants carrying all of ``tags``."""
        return (obj for obj in self.walk() if obj.tagged(*tags))

    def find_first(self, *tags: str) -> BaseObject:
        for obj in self.find(*tags):
            return obj
        raise SceneError(f"no object tagged {', '.join(tags)}")

    def __len__(self) -> int:
        return len(self._children)


def _walk(obj: BaseObject) -> Iterator[BaseObject]:
    for child in obj.children():
        yield child
        yield from _walk(child)
