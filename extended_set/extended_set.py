import logging
from collections.abc import Callable, Container, Iterable, Iterator
from typing import Any

# Internal imports
from extended_set.utils import adapt_callback
from extended_set.utils import InvalidOperation

# Marks an omitted reduce() initial value, so None/0/"" still count as supplied
_MISSING = object()

############################################### Generators ####################################################

def _map_gen(set_obj: "ExtendedSet", transform: Callable) -> Iterator:
    for item in set_obj:
        yield transform(item, item, set_obj)


def _filter_gen(set_obj: "ExtendedSet", predicate: Callable) -> Iterator:
    for item in set_obj:
        if predicate(item, item, set_obj):
            yield item


def _subtract_gen(items: Iterable, other: Container) -> Iterator:
    for item in items:
        if item not in other:
            yield item


def _union_gen(first: Iterable, second: Iterable) -> Iterator:
    yield from first
    yield from second


def _as_set(other: Iterable) -> "ExtendedSet | set | frozenset":
    # Sets keep their own membership test, anything else is read once into an ExtendedSet
    if isinstance(other, (ExtendedSet, set, frozenset)):
        return other
    return ExtendedSet(other)


def _xor_gen(first: Iterable, second: Iterable) -> Iterator:
    first = _as_set(first)
    second = _as_set(second)

    yield from _union_gen(_subtract_gen(first, second), _subtract_gen(second, first))


class ExtendedSet:
    """
    A set with array-style helpers (map, filter, reduce, ...) and set algebra (union, xor, ...).

    Elements are stored as the keys of a dict, so iteration follows insertion order
    and uniqueness follows normal hash/equality rules: values compare by value,
    plain objects compare by identity.

    Derived operations return new sets. Mutating a set while one of its
    operations is iterating over it is not supported.
    """

    def __init__(self, items: Iterable | None = None):
        self.items: dict[Any, None] = {}
        if items is not None:
            for item in items:
                self.items[item] = None

    ############################################### Basics ####################################################

    @property
    def size(self) -> int:
        return len(self.items)

    def add(self, item) -> "ExtendedSet":
        """
        Add an item if it's not already present. Existing items keep their position.
        """
        if item not in self.items:
            self.items[item] = None
        return self

    def has(self, item) -> bool:
        return item in self.items

    def remove(self, item) -> bool:
        """
        Remove an item if it exists.

        Return True if the item was removed, False if it wasn't in the set.
        """
        if item in self.items:
            del self.items[item]
            return True
        return False

    def clear(self) -> None:
        self.items.clear()

    def copy(self) -> "ExtendedSet":
        return ExtendedSet(self)

    ############################################### Iteration helpers ####################################################

    @property
    def first(self):
        """
        The first item in iteration order, or None for an empty set.
        """
        return next(iter(self.items), None)

    def map(self, transform: Callable) -> "ExtendedSet":
        """
        Apply `transform` to every item and collect the results in a new set.

        The result can be smaller than this set when `transform` maps different
        items to the same value.
        """
        transform = adapt_callback(transform, "map")
        result = ExtendedSet(_map_gen(self, transform))
        logging.debug(f"map: {self.size} items -> {result.size} items")
        return result

    def filter(self, predicate: Callable) -> "ExtendedSet":
        """
        New set with the items for which `predicate` returns a truthy value.
        """
        predicate = adapt_callback(predicate, "filter")
        result = ExtendedSet(_filter_gen(self, predicate))
        logging.debug(f"filter: {self.size} items -> {result.size} items")
        return result

    def reduce(self, combine: Callable, initial_value=_MISSING):
        """
        Fold all items into one value, like functools.reduce.

        `combine` is called as combine(accumulator, item, item, set) and returns
        the next accumulator. When `initial_value` is omitted the first item
        seeds the accumulator and `combine` runs for the remaining items.

        Raises:
            InvalidOperation: The set is empty and no initial value was given.
        """
        combine = adapt_callback(combine, "reduce", fallback=2)

        iterator = iter(self.items)
        if initial_value is _MISSING:
            if not self.items:
                raise InvalidOperation()
            result = next(iterator)
        else:
            result = initial_value

        for item in iterator:
            result = combine(result, item, item, self)

        return result

    def every(self, predicate: Callable) -> bool:
        """
        True if `predicate` is truthy for all items. Stops at the first failure.
        """
        check = adapt_callback(predicate, "every")
        for item in self.items:
            if not check(item, item, self):
                return False

        return True

    def some(self, predicate: Callable) -> bool:
        """
        True if `predicate` is truthy for any item. Stops at the first match.
        """
        check = adapt_callback(predicate, "some")
        for item in self.items:
            if check(item, item, self):
                return True

        return False

    def find(self, predicate: Callable, default=None):
        """
        First item for which `predicate` is truthy, `default` if there is none.
        """
        check = adapt_callback(predicate, "find")
        for item in self.items:
            if check(item, item, self):
                return item

        return default

    def join(self, separator: str = ",") -> str:
        return separator.join(str(item) for item in self.items)

    ############################################### Set algebra ####################################################

    def union(self, other: Iterable) -> "ExtendedSet":
        """
        New set with the items of this set followed by the items of `other`.
        """
        result = ExtendedSet(_union_gen(self, other))
        logging.debug(f"union: {self.size} items -> {result.size} items")
        return result

    def subtract(self, other: Iterable) -> "ExtendedSet":
        """
        New set with the items of this set that are not in `other` (A - B).

        Non-set operands are read into a set first.
        """
        result = ExtendedSet(_subtract_gen(self, _as_set(other)))
        logging.debug(f"subtract: {self.size} items -> {result.size} items")
        return result

    def xor(self, other: Iterable) -> "ExtendedSet":
        """
        New set with the items that are in exactly one of the two sets (A ^ B).

        Items only in this set come first, followed by items only in `other`.
        """
        result = ExtendedSet(_xor_gen(self, other))
        logging.debug(f"xor: {self.size} items -> {result.size} items")
        return result

    def intersect(self, other: Iterable) -> "ExtendedSet":
        """
        New set with the items of this set that are also in `other`, in this set's order.
        """
        other = _as_set(other)
        return self.filter(lambda item: item in other)

    def is_subset_of(self, other: Iterable) -> bool:
        """
        True if every item of this set is in `other`. An empty set is a subset of anything.
        """
        other = _as_set(other)
        return self.every(lambda item: item in other)

    isSubsetOf = is_subset_of

    def equals(self, other) -> bool:
        """
        True if both sets hold the same items, regardless of order.
        """
        other = _as_set(other)
        return self.size == len(other) and self.is_subset_of(other)

    def update(self, items: Iterable) -> "ExtendedSet":
        """
        Add all items from the iterable to this set, in place.

        Returns this set so calls can be chained.
        """
        for item in items:
            self.add(item)

        logging.debug(f"update: set now has {self.size} items")
        return self

    ############################################### Dunders ####################################################

    def __contains__(self, item):
        return item in self.items

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __eq__(self, other):
        """
        Equal to other sets (ExtendedSet, set, frozenset) with the same items
        """
        if isinstance(other, (ExtendedSet, set, frozenset)):
            return self.equals(other)
        return NotImplemented

    # Mutable, so not hashable (same as the built-in set)
    __hash__ = None

    def __or__(self, other):
        if isinstance(other, (ExtendedSet, set, frozenset)):
            return self.union(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, (ExtendedSet, set, frozenset)):
            return self.subtract(other)
        return NotImplemented

    def __xor__(self, other):
        if isinstance(other, (ExtendedSet, set, frozenset)):
            return self.xor(other)
        return NotImplemented

    def __and__(self, other):
        if isinstance(other, (ExtendedSet, set, frozenset)):
            return self.intersect(other)
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, (ExtendedSet, set, frozenset)):
            return self.is_subset_of(other)
        return NotImplemented

    def __repr__(self):
        if not self.items:
            return "ExtendedSet()"
        return f"ExtendedSet({{{', '.join(repr(item) for item in self.items)}}})"
