import pytest

from questbook import day16

EXAMPLE = [
    "1,2,3",
    "",
    "^_^ -.- ^,-",
    ">.- ^_^ >.<",
    "-_- -.- >.<",
    "    -.^ ^_^",
    "    >.>",
]

SAME = [
    "1,1,1",
    "",
    "^_^ ^_^ ^_^",
    "^_^ ^_^ ^_^",
]

NO_MATCH = [
    "1,1",
    "",
    "a_b c_d",
]


def test_cat_face_counts_symbols_and_eyes():
    face = day16.CatFace("^_^")
    assert face.symbols == {"^": 2, "_": 1}
    assert face.eyes == {"^": 2}


def test_cat_face_too_short_raises():
    with pytest.raises(ValueError):
        day16.CatFace("^_")


def test_symbol_counts_sums_faces():
    faces = [day16.CatFace("^_^"), day16.CatFace(">.^")]
    assert day16.symbol_counts(faces) == {"^": 3, "_": 1, ">": 1, ".": 1}
    assert day16.symbol_counts(faces, True) == {"^": 3, ">": 1}


def test_score_pays_only_triples():
    assert day16.score({"a": 3, "b": 5, "c": 2}) == 4
    assert day16.score({"a": 2, "b": 1}) == 0


def test_parse_machine_reads_columns():
    spins, wheels = day16.parse_machine(EXAMPLE)
    assert spins == [1, 2, 3]
    assert [len(wheel) for wheel in wheels] == [3, 5, 4]
    assert [face.face for face in wheels[1]] == ["-.-", "^_^", "-.-", "-.^", ">.>"]


def test_parse_machine_empty_wheel_raises():
    with pytest.raises(ValueError):
        day16.parse_machine(["1,1", "", "^_^"])


def test_part1_example():
    assert day16.part1(EXAMPLE) == ">.- -.- ^,-"


def test_part2_without_matches_is_zero():
    assert day16.part2(NO_MATCH) == 0


def test_part2_all_same_faces_pays_every_round():
    _, wheels = day16.parse_machine(SAME)
    per_round = day16.score(day16.symbol_counts([w[0] for w in wheels], True))
    assert day16.part2(SAME) == per_round * day16.PART2_ROUNDS


def test_generate_combinations_in_order():
    _, wheels = day16.parse_machine(EXAMPLE)
    combos = day16.generate_combinations(wheels)
    assert len(combos) == 3 * 5 * 4
    assert combos == sorted(combos)
    assert combos[0] == (0, 0, 0)
    assert len(set(combos)) == len(combos)


def test_up_and_down_positions_are_inverse():
    _, wheels = day16.parse_machine(EXAMPLE)
    for combo in day16.generate_combinations(wheels):
        node = day16.LinkedNode(combo, wheels)
        up = day16.LinkedNode(node.up_position(wheels), wheels)
        assert up.down_position(wheels) == combo
        assert all(0 <= p < len(w) for p, w in zip(node.up_position(wheels), wheels))


def test_linked_node_equality_by_positions():
    _, wheels = day16.parse_machine(EXAMPLE)
    assert day16.LinkedNode((1, 2, 3), wheels) == day16.LinkedNode([1, 2, 3], wheels)


def test_get_limit_at_max_depth_is_node_value():
    _, wheels = day16.parse_machine(SAME)
    node = day16.LinkedNode((0, 0, 0), wheels)
    assert day16.get_limit(node, True, 0, 0) == node.value


def test_get_limit_unlinked_raises():
    _, wheels = day16.parse_machine(SAME)
    node = day16.LinkedNode((0, 0, 0), wheels)
    with pytest.raises(ValueError):
        day16.get_limit(node, True, 0, 1)


def test_part3_limits_are_ordered():
    most, fewest = day16.part3(EXAMPLE)
    assert most >= fewest >= 0


def test_part3_same_faces_gives_equal_limits():
    _, wheels = day16.parse_machine(SAME)
    value = day16.LinkedNode((0, 0, 0), wheels).value
    assert day16.part3(SAME) == (2 * value, 2 * value)