import pytest

from hopstep.garbage_collector import (
    INVALID_GC_POOL_INDEX,
    GarbageCollector,
    GCObject,
    get_garbage_collector,
)


class Node(GCObject):
    def __init__(self, *children):
        super().__init__()
        self.children = list(children)

    def gc_properties(self):
        return list(self.children)


def test_register_assigns_sequential_indexes():
    gc = GarbageCollector()
    nodes = [Node() for _ in range(3)]
    for node in nodes:
        gc.register(node)
    assert [n.gc_pool_index for n in nodes] == list(range(3))
    assert gc.get_object(1) is nodes[1]


def test_register_twice_raises():
    gc = GarbageCollector()
    node = Node()
    gc.register(node)
    with pytest.raises(ValueError):
        gc.register(node)


def test_unreachable_object_collected():
    gc = GarbageCollector()
    node = Node()
    index = gc.register(node)
    removed = gc.mark_and_sweep()
    assert removed == [node]
    assert gc.get_object(index) is None
    assert node.gc_pool_index == INVALID_GC_POOL_INDEX


def test_root_and_children_survive_and_marks_cleared():
    gc = GarbageCollector()
    leaf = Node()
    middle = Node(leaf, None)
    root = Node(middle)
    root.gc_root = True
    stray = Node()
    for node in (leaf, middle, root, stray):
        gc.register(node)
    removed = gc.mark_and_sweep()
    assert removed == [stray]
    assert len(gc) == 3
    assert not any(n.gc_mark for n in (leaf, middle, root))


def test_mark_sets_marks_on_reachable_only():
    gc = GarbageCollector()
    child = Node()
    root = Node(child)
    root.gc_root = True
    other = Node()
    for node in (child, root, other):
        gc.register(node)
    gc.mark()
    assert root.gc_mark and child.gc_mark
    assert not other.gc_mark
    assert gc.sweep() == [other]


def test_unrooted_cycle_collected():
    gc = GarbageCollector()
    a = Node()
    b = Node(a)
    a.children.append(b)
    gc.register(a)
    gc.register(b)
    assert set(gc.mark_and_sweep()) == {a, b}
    assert len(gc) == 0


def test_rooted_cycle_kept():
    gc = GarbageCollector()
    a = Node()
    b = Node(a)
    a.children.append(b)
    a.gc_root = True
    gc.register(a)
    gc.register(b)
    assert gc.mark_and_sweep() == []
    assert len(gc) == 2


def test_freed_indexes_reused_last_first():
    gc = GarbageCollector()
    nodes = [Node() for _ in range(3)]
    nodes[1].gc_root = True
    for node in nodes:
        gc.register(node)
    gc.mark_and_sweep()
    first = Node()
    second = Node()
    assert gc.register(first) == 2
    assert gc.register(second) == 0


def test_get_object_out_of_range():
    gc = GarbageCollector()
    gc.register(Node())
    assert gc.get_object(5) is None
    assert gc.get_object(-1) is None


def test_shutdown_releases_roots():
    gc = GarbageCollector()
    root = Node()
    root.gc_root = True
    gc.register(root)
    gc.shutdown()
    assert len(gc) == 0
    assert gc.get_object(0) is None
    assert root.gc_pool_index == INVALID_GC_POOL_INDEX


def test_global_collector_is_shared():
    node = Node()
    index = get_garbage_collector().register(node)
    assert get_garbage_collector().get_object(index) is node
    removed = get_garbage_collector().mark_and_sweep()
    assert node in removed
    assert get_garbage_collector().get_object(index) is None