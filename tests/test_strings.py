import random

import pytest

from algonotes.strings import (
    INT_MAX,
    INT_MIN,
    beauty_sum,
    frequency_sort,
    is_anagram,
    is_isomorphic,
    kth_character,
    kth_character_with_operations,
    largest_odd_number,
    longest_common_prefix,
    longest_palindrome,
    max_depth,
    my_atoi,
    possible_string_count,
    remove_outer_parentheses,
    reverse_words,
    roman_to_int,
    rotate_string,
)

_NUMERALS = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]


def _to_roman(number):
    parts = []
    for value, symbol in _NUMERALS:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def _next_letter(ch):
    return "a" if ch == "z" else chr(ord(ch) + 1)


def test_longest_palindrome_finds_embedded_palindrome():
    core = "racecar"
    assert longest_palindrome("xy" + core + "zw") == core


@pytest.mark.parametrize("s", ["", "q"])
def test_longest_palindrome_short_input_is_returned(s):
    assert longest_palindrome(s) == s


@pytest.mark.parametrize("s", ["babad", "cbbd", "forgeeksskeegfor", "abcdef"])
def test_longest_palindrome_is_palindromic_substring(s):
    result = longest_palindrome(s)
    assert result in s
    assert result == result[::-1]
    assert len(result) >= 1


@pytest.mark.parametrize("text", ["42", "   -42", "+7", "0012", "-0"])
def test_my_atoi_agrees_with_int_on_plain_numbers(text):
    assert my_atoi(text) == int(text)


def test_my_atoi_stops_at_first_non_digit():
    assert my_atoi("  123abc456") == int("123")


def test_my_atoi_clamps_to_32_bit_range():
    assert my_atoi("99999999999") == INT_MAX
    assert my_atoi("-99999999999") == INT_MIN
    assert INT_MAX == 2**31 - 1


def test_roman_round_trip():
    for number in range(1, 4000):
        assert roman_to_int(_to_roman(number)) == number


def test_roman_rejects_unknown_symbol():
    with pytest.raises(ValueError):
        roman_to_int("XIZ")


def test_longest_common_prefix_of_shared_stem():
    prefix = "inter"
    assert longest_common_prefix([prefix + "net", prefix + "val", prefix + "state"]) == prefix


def test_longest_common_prefix_edge_cases():
    assert longest_common_prefix([]) == ""
    assert longest_common_prefix(["alone"]) == "alone"
    assert longest_common_prefix(["dog", "racecar", "car"]) == ""


@pytest.mark.parametrize("s", ["  the sky  is blue ", "hello", "a good   example", "   "])
def test_reverse_words_twice_normalises_spacing(s):
    once = reverse_words(s)
    assert once == once.strip()
    assert "  " not in once
    assert reverse_words(once) == " ".join(s.split())


def test_is_isomorphic_under_bijection():
    s = "paperbanana"
    table = str.maketrans("pabnre", "qwxyzt")
    assert is_isomorphic(s, s.translate(table))


def test_is_isomorphic_rejects_non_injective_mappings():
    assert not is_isomorphic("ab" * 3, "aaaaaa")
    assert not is_isomorphic("aaaaaa", "ab" * 3)
    assert not is_isomorphic("abc", "ab")


def test_is_anagram_of_shuffle():
    letters = list("anagramnagaram")
    random.Random(7).shuffle(letters)
    assert is_anagram("anagramnagaram", "".join(letters))


def test_is_anagram_detects_difference():
    assert not is_anagram("rat", "car")
    assert not is_anagram("ab", "abc")


def test_frequency_sort_pinned_example():
    assert frequency_sort("tree") == "eetr"


@pytest.mark.parametrize("s", ["cccaaa", "Aabb", "mississippi", ""])
def test_frequency_sort_groups_by_descending_count(s):
    result = frequency_sort(s)
    assert sorted(result) == sorted(s)
    blocks = []
    for ch in result:
        if blocks and blocks[-1][0] == ch:
            blocks[-1][1] += 1
        else:
            blocks.append([ch, 1])
    assert len(blocks) == len(set(s))
    counts = [count for _, count in blocks]
    assert counts == sorted(counts, reverse=True)


def test_rotate_string_accepts_every_rotation():
    s = "abcde"
    for i in range(len(s)):
        assert rotate_string(s, s[i:] + s[:i])


def test_rotate_string_rejects_non_rotations():
    assert not rotate_string("abcde", "abced")
    assert not rotate_string("abc", "abcd")
    assert rotate_string("", "")


def test_remove_outer_parentheses_unwraps_each_group():
    parts = ["()()", "()", "", "(())()"]
    s = "".join("(" + part + ")" for part in parts)
    assert remove_outer_parentheses(s) == "".join(parts)


@pytest.mark.parametrize("depth", range(0, 6))
def test_max_depth_of_nested_string(depth):
    assert max_depth("(" * depth + "x+1" + ")" * depth) == depth


def test_max_depth_of_siblings_is_one():
    assert max_depth("()" * 5) == max_depth("()")


def test_beauty_sum_pinned_example():
    assert beauty_sum("aabcb") == 5


def test_beauty_sum_of_single_letter_run_is_zero():
    assert beauty_sum("zzzzzz") == beauty_sum("")


@pytest.mark.parametrize("s", ["aabcbaa", "abcab", "xyzzy"])
def test_beauty_sum_is_reversal_invariant(s):
    assert beauty_sum(s) == beauty_sum(s[::-1])


def test_largest_odd_number_without_odd_digits():
    assert largest_odd_number("2468") == ""


def test_kth_character_first_letter():
    assert kth_character(1) == "a"


def test_kth_character_second_half_is_shifted_first_half():
    for m in range(7):
        half = 2**m
        for k in range(1, half + 1):
            assert kth_character(k + half) == _next_letter(kth_character(k))


def test_kth_character_rejects_non_positive():
    with pytest.raises(ValueError):
        kth_character(0)


def test_kth_character_with_all_shifting_operations_matches_plain_game():
    operations = [1] * 10
    for k in range(1, 2**10 + 1):
        assert kth_character_with_operations(k, operations) == kth_character(k)


def test_kth_character_with_copy_operations_stays_a():
    operations = [0] * 8
    assert {kth_character_with_operations(k, operations) for k in range(1, 257)} == {"a"}


def test_kth_character_with_operations_out_of_range():
    with pytest.raises(ValueError):
        kth_character_with_operations(5, [1, 0])
    with pytest.raises(ValueError):
        kth_character_with_operations(0, [1])


@pytest.mark.parametrize("runs", [(1, 1, 1), (3, 1), (2, 4, 1), (5,)])
def test_possible_string_count_from_runs(runs):
    word = "".join(letter * run for letter, run in zip("abcde", runs))
    assert possible_string_count(word) == sum(run - 1 for run in runs) + 1