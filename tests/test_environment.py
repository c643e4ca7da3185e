from funlang.environment import Environment


def test_empty_lookup_misses():
    env = Environment()
    assert env.get('x') is None
    assert 'x' not in env
    assert len(env) == 0


def test_insert_returns_new_environment():
    empty = Environment()
    one = empty.insert('x', 1)
    two = one.insert('y', 2)
    assert empty.get('x') is None
    assert one.get('x') == 1
    assert one.get('y') is None
    assert two.get('x') == 1 and two.get('y') == 2
    assert len(one) == 1 and len(two) == 2


def test_shadowing_hides_only_in_new_version():
    outer = Environment().insert('a', 1)
    inner = outer.insert('a', 2)
    assert outer.get('a') == 1
    assert inner.get('a') == 2
    assert len(inner) == 1


def test_many_inserts_stay_consistent():
    env = Environment()
    snapshots = []
    for i in range(200):
        env = env.insert(f"v{i:03d}", i)
        snapshots.append(env)
    assert len(env) == 200
    assert all(env.get(f"v{i:03d}") == i for i in range(200))
    # every earlier version still sees exactly its own prefix
    assert snapshots[49].get('v049') == 49
    assert snapshots[49].get('v050') is None
    assert len(snapshots[49]) == 50


def test_iteration_is_sorted():
    env = Environment()
    for name in ['m', 'c', 'x', 'a', 'q']:
        env = env.insert(name, name.upper())
    assert list(env) == ['a', 'c', 'm', 'q', 'x']
    assert dict(env.items()) == {'a': 'A', 'c': 'C', 'm': 'M', 'q': 'Q', 'x': 'X'}


def test_tree_stays_balanced():
    env = Environment()
    for i in range(1024):
        env = env.insert(f"{i:04d}", i)
    # an AVL tree with 1024 nodes is at most ~1.44 * log2(n) high
    assert env._root.height <= 15
