"""Tests for the table/class/variable name helpers built on top of inflection."""

import pytest


class TestTableNames:
    def test_tableize(self, inflector):
        assert inflector.tableize("Person") == "people"
        assert inflector.tableize("UserProfile") == "user_profiles"
        assert inflector.tableize("SalesPerson") == "sales_people"
        assert inflector.tableize("Category") == "categories"

    def test_classify(self, inflector):
        assert inflector.classify("people") == "Person"
        assert inflector.classify("user_profiles") == "UserProfile"
        assert inflector.classify("sales_people") == "SalesPerson"
        assert inflector.classify("categories") == "Category"

    def test_tableize_follows_the_active_language(self, french):
        assert french.tableize("Cheval") == "chevaux"


class TestCaseConversions:
    def test_camelize(self, inflector):
        assert inflector.camelize("big_red_dog") == "bigRedDog"
        assert inflector.camelize("big.red.dog", ".") == "bigRedDog"

    def test_pascalize(self, inflector):
        assert inflector.pascalize("big_red_dog") == "BigRedDog"
        assert inflector.pascalize("big-red dog") == "BigRedDog"

    def test_underscore(self, inflector):
        assert inflector.underscore("BigRedDog") == "big_red_dog"
        assert inflector.underscore("already_snake") == "already_snake"
        assert inflector.underscore("lower") == "lower"

    def test_dasherize(self, inflector):
        assert inflector.dasherize("BigRedDog") == "big-red-dog"

    def test_delimit(self, inflector):
        assert inflector.delimit("BigRedDog") == "big_red_dog"
        assert inflector.delimit("BigRedDog", ".") == "big.red.dog"

    def test_humanize(self, inflector):
        assert inflector.humanize("employee_salary") == "Employee Salary"
        assert inflector.humanize("employee-salary", "-") == "Employee Salary"
        assert inflector.humanize("EmployeeSalary") == "Employee Salary"

    def test_variable(self, inflector):
        assert inflector.variable("some_field") == "someField"
        assert inflector.variable("Some Field") == "someField"

    @pytest.mark.parametrize("operation", [
        "camelize", "pascalize", "underscore", "dasherize", "delimit",
        "humanize", "tableize", "classify", "variable", "transliterate", "slug",
    ])
    def test_empty_input(self, inflector, operation):
        assert getattr(inflector, operation)("") == ""

    def test_empty_delimiter(self, inflector):
        assert inflector.camelize("big_dog", "") == "bigDog"
        assert inflector.humanize("big_dog", "") == "Big Dog"


class TestTransliteration:
    def test_transliterate(self, inflector):
        assert inflector.transliterate("Ça été déjà") == "Ca ete deja"
        assert inflector.transliterate("Größe") == "Groesse"

    def test_unknown_characters_are_dropped(self, inflector):
        assert inflector.transliterate("snow☃man") == "snowman"

    def test_custom_transliteration(self, inflector):
        assert inflector.transliterate("å") == "a"
        inflector.rules("transliteration", {"å": "aa"})
        assert inflector.transliterate("å") == "aa"

    def test_slug(self, inflector):
        assert inflector.slug("Héllo Wörld @ Home") == "hello-woerld-at-home"
        assert inflector.slug("Hello World", "_") == "hello_world"
        assert inflector.slug("  already-sluggy_text ") == "already-sluggy-text"


class TestCountedPlural:
    def test_below_two_is_singular(self, inflector):
        assert inflector.plural("apple", 1) == "apple"
        assert inflector.plural("apple", 0) == "apple"

    def test_plural(self, inflector):
        assert inflector.plural("apple") == "apples"
        assert inflector.plural("apple", 3, prepend_count=True) == "3 apples"

    def test_collection_count(self, inflector):
        assert inflector.plural("box", ["a", "b"]) == "boxes"
        assert inflector.plural("box", ["a"]) == "box"
