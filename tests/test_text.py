"""Tests for the case conversion helpers."""

from inflector import text


def test_ucfirst_and_lcfirst():
    assert text.ucfirst("hello") == "Hello"
    assert text.lcfirst("ABC") == "aBC"
    assert text.ucfirst("") == ""


def test_ucwords():
    assert text.ucwords("hello big\tworld") == "Hello Big\tWorld"


def test_studly_and_camel():
    assert text.studly("big_red-dog") == "BigRedDog"
    assert text.pascal("big red dog") == "BigRedDog"
    assert text.camel("big_red_dog") == "bigRedDog"


def test_snake():
    assert text.snake("BigRedDog") == "big_red_dog"
    assert text.snake("big dog") == "big_dog"
    assert text.snake("BigRedDog", "-") == "big-red-dog"
    assert text.snake("lowercase") == "lowercase"


def test_snake_splits_every_capital():
    assert text.snake("HTMLParser") == "h_t_m_l_parser"


def test_title():
    assert text.title("hello WORLD") == "Hello World"
    assert text.title("employee salary") == "Employee Salary"


def test_to_ascii():
    assert text.to_ascii("naïve ☃", {"ï": "i"}) == "naive "


def test_slug_dictionary():
    assert text.slug("Tom & Jerry", {}, dictionary={"&": "and"}) == "tom-and-jerry"
