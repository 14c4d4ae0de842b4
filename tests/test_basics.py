import pytest

from rustdrill.lessons.basics import (
    animal_habitat,
    bigger,
    compose_me,
    fill_vec,
    foo_if_fizz,
    is_a_color_word,
    is_even,
    new_filled_vec,
    replace_me,
    sale_price,
    square,
    trim_me,
    vec_loop,
    vec_map,
)


def test_sale_price_odd_and_even():
    assert sale_price(51) == 48
    assert sale_price(50) == 40


def test_is_even():
    assert is_even(2)
    assert not is_even(5)


def test_square():
    assert square(3) == 9


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_equal_numbers():
    assert bigger(42, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


@pytest.mark.parametrize(
    ("animal", "habitat"),
    [
        ("gopher", "Burrow"),
        ("snake", "Desert"),
        ("crab", "Beach"),
        ("dinosaur", "Unknown"),
    ],
)
def test_animal_habitat(animal, habitat):
    assert animal_habitat(animal) == habitat


EVENS = [2, 4, 6, 8, 10]


def test_vec_loop():
    assert vec_loop(EVENS) == [4, 8, 12, 16, 20]


def test_vec_map():
    assert vec_map(EVENS) == [4, 8, 12, 16, 20]


def test_fill_vec_appends():
    assert fill_vec([22, 44, 66]) == [22, 44, 66, 88]


def test_fill_vec_keeps_input_separate():
    vec0 = [22, 44, 66]
    vec1 = fill_vec(vec0)
    assert vec0 == [22, 44, 66]
    assert vec1 == [22, 44, 66, 88]


def test_new_filled_vec():
    assert new_filled_vec() == [22, 44, 66, 88]


def test_color_words():
    assert is_a_color_word("green")
    assert is_a_color_word("red")
    assert not is_a_color_word("purple")


def test_trim_a_string():
    assert trim_me("Hello!     ") == "Hello!"
    assert trim_me("  What's up!") == "What's up!"
    assert trim_me("   Hola!  ") == "Hola!"


def test_compose_a_string():
    assert compose_me("Hello") == "Hello world!"
    assert compose_me("Goodbye") == "Goodbye world!"


def test_replace_a_string():
    assert replace_me("I think cars are cool") == "I think balloons are cool"
    assert replace_me("I love to look at cars") == "I love to look at balloons"