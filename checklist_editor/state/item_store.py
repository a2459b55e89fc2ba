"""Item store.

Owns the ordered collection of checklist items. Selection and edit state
cleanup on removal is the controller's job, not the store's.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from checklist_editor.exceptions import ItemNotFoundError
from checklist_editor.ids import IdGenerator, UuidGenerator
from checklist_editor.models import Item
from checklist_editor.state.events import (
    ItemAdded,
    ItemRemoved,
    ItemTextChanged,
    StateEvent,
)

if TYPE_CHECKING:
    from textual.app import App

logger = logging.getLogger(__name__)


class ItemStore:
    """Insertion-ordered collection of items keyed by ID.

    Handles:
    - Appending new empty items at the tail
    - Replacing item text in place
    - Removing items while preserving the order of the rest
    """

    def __init__(self, id_generator: IdGenerator | None = None) -> None:
        """Initialize the item store.

        Args:
            id_generator: Source of fresh item IDs. Defaults to UUIDs.
        """
        # dicts keep insertion order, which is the display order
        self._items: dict[str, Item] = {}
        self._id_generator = id_generator or UuidGenerator()
        self._app: App | None = None
        self._emit_callback: Callable[[StateEvent, dict[str, Any]], None] | None = None

    def connect_app(self, app: App) -> None:
        """Connect to a Textual App for message posting.

        Args:
            app: The Textual App instance.
        """
        self._app = app

    def set_emit_callback(
        self, callback: Callable[[StateEvent, dict[str, Any]], None]
    ) -> None:
        """Set callback for emitting events to subscribers.

        Args:
            callback: Function to call with (event, kwargs) when emitting.
        """
        self._emit_callback = callback

    def _post_message(self, message: Any) -> None:
        """Post a message to the connected Textual app."""
        if self._app is not None:
            self._app.post_message(message)

    def _emit(self, event: StateEvent, **kwargs: Any) -> None:
        """Emit event to subscribers."""
        if self._emit_callback:
            self._emit_callback(event, kwargs)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def contains(self, item_id: str) -> bool:
        """Check whether an item with this ID exists."""
        return item_id in self._items

    def add(self) -> str:
        """Append a new item with empty text.

        Returns:
            The ID of the new item.
        """
        item_id = self._id_generator.next()
        if item_id in self._items:
            # A generator handing out a live ID is a programming error
            raise ValueError(f"Duplicate item id from generator: {item_id}")

        item = Item(id=item_id)
        self._items[item_id] = item
        logger.debug("Added item %s", item_id)
        self._emit(StateEvent.ITEM_ADDED, item=item)
        self._post_message(ItemAdded(item))
        return item_id

    def set_text(self, item_id: str, text: str) -> bool:
        """Replace the text of an item.

        Args:
            item_id: The item to update.
            text: The new text, possibly empty.

        Returns:
            True if the item exists, False if the ID is unknown.
        """
        item = self._items.get(item_id)
        if item is None:
            return False

        if item.text != text:
            item.text = text
            self._emit(StateEvent.ITEM_TEXT_CHANGED, item=item)
            self._post_message(ItemTextChanged(item))
        return True

    def remove(self, item_id: str) -> Item | None:
        """Remove an item. Removing an unknown ID is a no-op.

        Args:
            item_id: The item to remove.

        Returns:
            The removed item, or None if it did not exist.
        """
        item = self._items.pop(item_id, None)
        if item is not None:
            logger.debug("Removed item %s", item_id)
            self._emit(StateEvent.ITEM_REMOVED, item=item)
            self._post_message(ItemRemoved(item))
        return item

    def get(self, item_id: str) -> Item | None:
        """Get an item by ID.

        Args:
            item_id: The item ID.

        Returns:
            The item if found, None otherwise.
        """
        return self._items.get(item_id)

    def require(self, item_id: str, *, operation: str | None = None) -> Item:
        """Get an item by ID, raising if it does not exist.

        Raises:
            ItemNotFoundError: If the ID is unknown.
        """
        item = self._items.get(item_id)
        if item is None:
            raise ItemNotFoundError(item_id, operation=operation)
        return item

    def list_items(self) -> list[Item]:
        """Return the items in display order.

        The list is a fresh copy; the items are copies too, so callers
        cannot mutate the store through them.
        """
        return [Item(id=item.id, text=item.text) for item in self._items.values()]

    def ids(self) -> list[str]:
        """Return item IDs in display order."""
        return list(self._items)
