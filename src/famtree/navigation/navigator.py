from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from famtree.logging import get_logger
from famtree.navigation.state import HistoryPort, NavigationState
from famtree.registry.entities import FamilyTree, Person

log = get_logger(__name__)

RedrawListener = Callable[["RenderFrame"], None]


@dataclass(frozen=True, slots=True)
class RenderFrame:
    """
    What a renderer draws for one focus: the ancestor chain above it, the
    focus itself, and its direct children. Nothing deeper is expanded.
    """
    ancestors: Tuple[Person, ...] = ()
    focus: Optional[Person] = None
    children: Tuple[Person, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.focus is None


class Navigator:
    """
    Focus tracking over a finished FamilyTree.

    ``focus`` is the only mutable state; the tree itself is read-only. Commands
    with ids that do not exist keep the current focus.
    """

    def __init__(
        self,
        tree: FamilyTree,
        history: Optional[HistoryPort] = None,
        listeners: Optional[List[RedrawListener]] = None,
    ):
        self.tree = tree
        self.root: Optional[Person] = tree.root
        self.focus: Optional[Person] = self.root
        self.history = history
        self._listeners: List[RedrawListener] = list(listeners or [])

    # -- queries ---------------------------------------------------------

    def path_to_root(self, person: Optional[Person]) -> List[Person]:
        """
        Ancestor chain of ``person`` ordered root -> person.

        Walks parent ids upward until it reaches the root, a person without a
        resolvable parent, or a repeated id. The chain always starts at the
        tree root, which is prepended when the walk ends elsewhere. Every id
        appears at most once, also when the root sits inside a parent cycle.
        """
        if person is None or self.root is None:
            return []

        chain: List[Person] = []
        visited = set()
        current: Optional[Person] = person
        while current is not None and current.id not in visited:
            visited.add(current.id)
            chain.append(current)
            if current.id == self.root.id:
                break
            current = self.tree.parent_of(current)

        chain.reverse()
        if self.root.id not in visited:
            chain.insert(0, self.root)
        return chain

    def breadcrumb(self) -> List[str]:
        return [p.name for p in self.path_to_root(self.focus)]

    def state(self) -> NavigationState:
        return NavigationState.from_names(self.breadcrumb())

    def frame(self) -> RenderFrame:
        if self.focus is None:
            return RenderFrame()
        path = self.path_to_root(self.focus)
        return RenderFrame(
            ancestors=tuple(path[:-1]),
            focus=self.focus,
            children=tuple(self.tree.children_of(self.focus)),
        )

    # -- commands --------------------------------------------------------

    def subscribe(self, listener: RedrawListener) -> None:
        self._listeners.append(listener)

    def navigate_to(self, target: Union[Person, str, None]) -> Optional[Person]:
        """
        Focus ``target`` (a Person or a person id), record the breadcrumb in
        history and ask listeners to redraw. Returns the focus afterwards.
        """
        person = target if isinstance(target, Person) else self.tree.get(target)
        if person is None or person.id not in self.tree:
            log.debug("navigate_to: unknown target %r, focus kept", target)
            return self.focus

        self.focus = self.tree.get(person.id)
        if self.history is not None:
            self.history.save(self.state())
        self._redraw()
        return self.focus

    def restore(self, state: Optional[NavigationState] = None) -> Optional[Person]:
        """
        Rebuild the focus from a persisted name path.

        Names are resolved in order; the walk stops at the first name that no
        longer resolves and keeps the last person found. Nothing resolved
        means focus on the root. No history entry is written.
        """
        if state is None and self.history is not None:
            state = self.history.load()

        found: Optional[Person] = None
        for name in (state.path if state else ()):
            person = self.tree.find_by_name(name)
            if person is None:
                break
            found = person

        self.focus = found or self.root
        self._redraw()
        return self.focus

    def back(self) -> Optional[Person]:
        """Step back one history entry when the port supports it."""
        back = getattr(self.history, "back", None)
        if back is None:
            return self.focus
        return self.restore(back() or NavigationState())

    def reset(self) -> Optional[Person]:
        return self.navigate_to(self.root)

    def _redraw(self) -> None:
        frame = self.frame()
        for listener in self._listeners:
            listener(frame)
