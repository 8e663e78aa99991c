import itertools
import logging

import numpy as np

logger = logging.getLogger(__name__)

_ids = itertools.count()


def next_id():
    return next(_ids)


def powf(base, exp):
    # IEEE-754 power: 0**-1 is inf, (-2)**0.5 is nan, overflow is inf
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(base), np.float64(exp)))


# derivative rules: each takes the node that owns it and pushes out.grad
# into out._prev

def _add_backward(out):
    left, right = out._prev
    left.grad += out.grad
    right.grad += out.grad


def _mul_backward(out):
    left, right = out._prev
    left.grad += out.grad * right.data
    right.grad += out.grad * left.data


def _pow_backward(out):
    base, exponent = out._prev
    p = exponent.data
    base.grad += out.grad * p * powf(base.data, p - 1)


def _relu_backward(out):
    child, = out._prev
    child.grad += out.grad * (1.0 if out.data > 0 else 0.0)


class Value:
    """ stores a single scalar value and its gradient """
    __slots__ = ("data", "grad", "_backward", "_prev", "_op", "_id")

    def __init__(self, data, _children=(), _op='', _backward=None):
        assert bool(_children) == bool(_op) == (_backward is not None), "composite nodes need an op and a derivative rule"
        self.data = float(data)
        self.grad = 0.0
        # internal variables used for autograd graph construction
        self._backward = _backward
        self._prev = tuple(_children)
        self._op = _op # the op that produced this node, for graphviz / debugging / etc
        self._id = next_id()

    @staticmethod
    def lift(other):
        return other if isinstance(other, Value) else Value(other)

    @property
    def op(self):
        return self._op

    def children(self):
        return self._prev

    def is_leaf(self):
        return not self._prev

    def __add__(self, other):
        other = Value.lift(other)
        return Value(self.data + other.data, (self, other), '+', _add_backward)

    def __mul__(self, other):
        other = Value.lift(other)
        return Value(self.data * other.data, (self, other), '*', _mul_backward)

    def pow(self, other):
        assert isinstance(other, (int, float)), "only supporting int/float powers for now"
        # the exponent is kept as a constant leaf so the rule can read it
        exponent = Value(other)
        return Value(powf(self.data, exponent.data), (self, exponent), '^', _pow_backward)

    def __pow__(self, other):
        return self.pow(other)

    def relu(self):
        return Value(self.data if self.data > 0 else 0.0, (self,), 'ReLU', _relu_backward)

    def topo(self):
        # reverse topological order: every node comes before its children
        topo = []
        visited = {self}
        stack = [(self, iter(self._prev))]
        while stack:
            v, children = stack[-1]
            for child in children:
                if child not in visited:
                    visited.add(child)
                    stack.append((child, iter(child._prev)))
                    break
            else:
                stack.pop()
                topo.append(v)
        topo.reverse()
        return topo

    def backward(self):
        topo = self.topo()
        logger.debug("backward from %r over %d nodes", self, len(topo))

        # go one variable at a time and apply the chain rule to get its gradient
        self.grad = 1.0
        for v in topo:
            if v._backward is not None:
                v._backward(v)

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __neg__(self): # -self
        return self * -1

    def __radd__(self, other): # other + self
        return Value.lift(other) + self

    def __sub__(self, other): # self - other
        return self + (-Value.lift(other))

    def __rsub__(self, other): # other - self
        return Value.lift(other) + (-self)

    def __rmul__(self, other): # other * self
        return Value.lift(other) * self

    def __truediv__(self, other): # self / other
        return self * Value.lift(other)**-1

    def __rtruediv__(self, other): # other / self
        return Value.lift(other) * self**-1

    def __repr__(self):
        return f"Value(data={self.data}, grad={self.grad})"
