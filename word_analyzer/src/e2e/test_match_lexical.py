# src/e2e/test_match_lexical.py

from analyzer.match import analyze, closest_lexical, compare_to


def test_compare_to_first_difference_and_prefix():
    assert compare_to("banana", "banana") == 0
    assert compare_to("cherry", "banana") == ord("c") - ord("b")
    assert compare_to("apple", "banana") < 0
    assert compare_to("band", "ban") == 1
    assert compare_to("ban", "banana") == -3


def test_exact_word_is_closest():
    assert closest_lexical("banana", ["apple", "banana", "cherry"]) == "banana"


def test_distance_is_first_character_displacement():
    # "bee" vs "bat" -> 'e'-'a' = 4, "cherry" vs "bat" -> 'c'-'b' = 1
    assert closest_lexical("bat", ["apple", "bee", "cherry"]) == "cherry"


def test_ties_go_to_first_in_sorted_order():
    # "batch" -> 2 (length), "dog" -> 2 ('d'-'b')
    assert closest_lexical("bat", ["dog", "apple", "batch"]) == "batch"


def test_prefix_extension_beats_later_letter():
    # "carrot" vs "car" -> 3 (length), "dog" vs "car" -> 1 (first char)
    assert closest_lexical("car", ["carrot", "dog"]) == "dog"


def test_no_following_word_gives_empty_string():
    assert closest_lexical("zzz", ["apple", "banana"]) == ""


def test_empty_list_gives_empty_string():
    assert closest_lexical("x", []) == ""


def test_input_order_is_untouched():
    words = ["cherry", "apple", "banana"]
    closest_lexical("b", words)
    assert words == ["cherry", "apple", "banana"]


def test_ordinal_order_uppercase_before_lowercase():
    # 'B' (66) sorts before 'a' (97); both follow 'A'
    assert closest_lexical("A", ["a", "B"]) == "B"


def test_analyze_pairs_both_matches():
    res = analyze("zzz", ["apple", "banana"])
    assert res.lexical == ""
    assert res.value in {"apple", "banana"}


def test_analyze_empty_list_keeps_distinct_sentinels():
    res = analyze("hello", [])
    assert res.value is None
    assert res.lexical == ""
    assert res.to_dict() == {"value": None, "lexical": ""}
