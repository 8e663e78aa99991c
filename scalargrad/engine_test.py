import unittest
from scalargrad.engine import Value, powf


def parents_of(topo):
    parents = {}
    for v in topo:
        for child in v.children():
            parents.setdefault(child, []).append(v)
    return parents


class IdentityTests(unittest.TestCase):
    def test_equal_data_not_equal_nodes(self):
        x = Value(123)
        y = Value(123)
        self.assertNotEqual(x, y)
        self.assertNotEqual(hash(x), hash(y))
        self.assertEqual(len({x, y}), 2)

    def test_same_node(self):
        x = Value(1)
        y = x
        self.assertEqual(x, y)
        self.assertEqual(hash(x), hash(y))

    def test_hash_stable_across_backward(self):
        x = Value(2)
        y = x * 3
        before = hash(x)
        y.backward()
        self.assertEqual(hash(x), before)

    def test_ids_increase(self):
        x = Value(0)
        y = x + 1
        self.assertLess(x._id, y._id)

    def test_not_equal_to_number(self):
        self.assertNotEqual(Value(1.0), 1.0)


class TopoTests(unittest.TestCase):
    def test_leaf(self):
        x = Value(1)
        self.assertEqual(x.topo(), [x])

    def test_root_first(self):
        x = Value(1)
        y = (x + 2) * 3
        topo = y.topo()
        self.assertIs(topo[0], y)

    def test_each_node_once(self):
        x = Value(2.0)
        y = Value(3.0)
        z = Value(4.0)
        l = x * y + x * z
        topo = l.topo()
        self.assertEqual(len(topo), len(set(topo)))
        # l, two products, three leaves
        self.assertEqual(len(topo), 6)
        self.assertEqual(set(topo), {l, x, y, z, *l.children()})

    def test_self_use_once(self):
        x = Value(5.0)
        s = x + x
        self.assertEqual(s.topo(), [s, x])

    def test_parents_before_children(self):
        a = Value(-4.0)
        b = Value(2.0)
        c = a + b
        d = a * b + b**3
        e = (c * d).relu() + c - d / a
        topo = e.topo()
        position = {v: i for i, v in enumerate(topo)}
        for child, parents in parents_of(topo).items():
            for parent in parents:
                self.assertLess(position[parent], position[child])

    def test_subgraph_only(self):
        x = Value(1.0)
        y = x + 1
        unrelated = x * 10
        self.assertNotIn(unrelated, y.topo())


class PowfTests(unittest.TestCase):
    def test_plain(self):
        self.assertEqual(powf(2.0, 3.0), 8.0)
        self.assertEqual(powf(4.0, 0.5), 2.0)

    def test_pole(self):
        self.assertEqual(powf(0.0, -1.0), float("inf"))

    def test_returns_float(self):
        self.assertIs(type(powf(2, 2)), float)


if __name__ == "__main__":
    unittest.main()
