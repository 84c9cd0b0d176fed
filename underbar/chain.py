from underbar import advanced, transforms
from underbar.iteration import ABSENT, identity


class Chain:
    """
    A chainable, lazy wrapper over a collection. Steps are recorded and only
    applied when a terminal method (``value``, ``reduce``, iteration, ...)
    asks for a result. The source is never mutated.
    """
    def __init__(self, source, ops=None):
        self._source = source
        self._ops = ops or []          # sequence of ("op_name", args)

    # --------- chainable steps (lazy) ----------
    def map(self, fn):
        return self._with_op(("map", (fn,)))

    def filter(self, pred):
        return self._with_op(("filter", (pred,)))

    def reject(self, pred):
        return self._with_op(("reject", (pred,)))

    def uniq(self):
        return self._with_op(("uniq", ()))

    def pluck(self, key):
        return self._with_op(("pluck", (key,)))

    def sort_by(self, iterator_or_key):
        return self._with_op(("sort_by", (iterator_or_key,)))

    def flatten(self):
        return self._with_op(("flatten", ()))

    def shuffle(self, rng=None):
        return self._with_op(("shuffle", (rng,)))

    def difference(self, *others):
        return self._with_op(("difference", others))

    def intersection(self, *others):
        return self._with_op(("intersection", others))

    def take(self, n):
        """Keep only the first n elements (none for n <= 0)"""
        return self._with_op(("take", (int(n),)))

    # --------- forcing evaluation ----------
    def value(self):
        """Apply every recorded step and return the resulting list"""
        result = self._source
        for op, args in self._ops:
            result = self._apply(op, args, result)
        if result is self._source:
            result = transforms.map_(result, identity)
        return result

    def __iter__(self):
        return iter(self.value())

    # --------- terminal steps ----------
    def reduce(self, fn, initial=ABSENT):
        return transforms.reduce_(self.value(), fn, initial)

    def contains(self, target):
        return transforms.contains(self.value(), target)

    def every(self, pred=None):
        return transforms.every(self.value(), pred)

    def some(self, pred=None):
        return transforms.some(self.value(), pred)

    def find(self, pred):
        return transforms.find(self.value(), pred)

    def group_by(self, key):
        return transforms.group_by(self.value(), key)

    def first(self, n=None):
        return transforms.first(self.value(), n)

    def last(self, n=None):
        return transforms.last(self.value(), n)

    # --------- helpers ----------
    @staticmethod
    def _apply(op, args, data):
        if op == "map":
            return transforms.map_(data, *args)
        elif op == "filter":
            return transforms.filter_(data, *args)
        elif op == "reject":
            return transforms.reject(data, *args)
        elif op == "uniq":
            return transforms.uniq(data)
        elif op == "pluck":
            return transforms.pluck(data, *args)
        elif op == "sort_by":
            return advanced.sort_by(data, *args)
        elif op == "flatten":
            return advanced.flatten(transforms.map_(data, identity))
        elif op == "shuffle":
            return advanced.shuffle(data, *args)
        elif op == "difference":
            return advanced.difference(transforms.map_(data, identity), *args)
        elif op == "intersection":
            return advanced.intersection(transforms.map_(data, identity), *args)
        elif op == "take":
            return transforms.first(transforms.map_(data, identity), *args)
        raise ValueError(f"Unknown op: {op}")

    def _with_op(self, op_tuple):
        return Chain(self._source, self._ops + [op_tuple])

    def __repr__(self):
        steps = " -> ".join(op for op, _ in self._ops) or "source"
        return f"Chain({steps})"


def chain(source):
    """Start a lazy chain over ``source``."""
    return Chain(source)
