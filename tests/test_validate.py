import pytest

from appregistry.validate import (
    ValidationError,
    validate_author,
    validate_desc,
    validate_file_name,
    validate_id,
    validate_name,
    validate_package_name,
    validate_summary,
)


@pytest.mark.parametrize(
    "value, should_err",
    [
        ("Cool App", False),
        ("Cool app", True),
        ("cool app", True),
        ("coolApp", True),
        ("Really Really Long App Name", True),
        ("", True),
    ],
)
def test_validate_name(value, should_err):
    if should_err:
        with pytest.raises(ValidationError):
            validate_name(value)
    else:
        assert validate_name(value) is None


@pytest.mark.parametrize(
    "value, should_err",
    [
        ("A cool app", False),
        ("A really really really cool app", True),
        ("A cool app.", True),
        ("A cool app!", True),
        ("A cool app?", True),
        ("a cool app", True),
        ("NYC Subway departures", False),
        ("", True),
    ],
)
def test_validate_summary(value, should_err):
    if should_err:
        with pytest.raises(ValidationError):
            validate_summary(value)
    else:
        assert validate_summary(value) is None


@pytest.mark.parametrize(
    "value, should_err",
    [
        ("A really cool app that does really cool app things.", False),
        ("a really cool app that does really cool app things.", True),
        ("A really cool app that does really cool app things", True),
        ("", True),
    ],
)
def test_validate_desc(value, should_err):
    if should_err:
        with pytest.raises(ValidationError):
            validate_desc(value)
    else:
        assert validate_desc(value) is None


@pytest.mark.parametrize(
    "value, should_err",
    [
        ("foo-bar", False),
        ("foobar", False),
        ("FooBar", True),
        ("foo$", True),
        ("", True),
    ],
)
def test_validate_id(value, should_err):
    if should_err:
        with pytest.raises(ValidationError):
            validate_id(value)
    else:
        assert validate_id(value) is None


@pytest.mark.parametrize(
    "value, should_err",
    [
        ("foo_bar.star", False),
        ("foo_bar", True),
        ("FooBar.star", True),
        ("foo$.star", True),
        ("", True),
    ],
)
def test_validate_file_name(value, should_err):
    if should_err:
        with pytest.raises(ValidationError):
            validate_file_name(value)
    else:
        assert validate_file_name(value) is None


@pytest.mark.parametrize(
    "value, should_err",
    [
        ("foobar", False),
        ("foo_bar", True),
        ("FooBar", True),
        ("foo$", True),
        ("", True),
    ],
)
def test_validate_package_name(value, should_err):
    if should_err:
        with pytest.raises(ValidationError):
            validate_package_name(value)
    else:
        assert validate_package_name(value) is None


@pytest.mark.parametrize("value", ["Word of the Day", "Mind The Gap", "MBTA", "A Cool App"])
def test_name_title_case_variants_accepted(value):
    assert validate_name(value) is None


def test_name_length_limit_is_seventeen():
    assert validate_name("Abcdefghijklmnopq") is None
    with pytest.raises(ValidationError, match="less then 17"):
        validate_name("Abcdefghijklmnopqr")


def test_name_error_messages():
    with pytest.raises(ValidationError, match="name cannot be empty"):
        validate_name("")
    with pytest.raises(ValidationError, match="'cool app' should be title case"):
        validate_name("cool app")


def test_summary_error_messages():
    with pytest.raises(ValidationError, match="should not end in punctuation"):
        validate_summary("A cool app.")
    with pytest.raises(ValidationError, match="uppercased character"):
        validate_summary("a cool app")
    with pytest.raises(ValidationError, match="less then 27"):
        validate_summary("A really really really cool app")


def test_desc_error_message():
    with pytest.raises(ValidationError, match="should end in punctuation"):
        validate_desc("Missing the end")


def test_author():
    assert validate_author("Tidbyt") is None
    with pytest.raises(ValidationError, match="author cannot be empty"):
        validate_author("")


def test_id_lower_case_message():
    with pytest.raises(ValidationError, match="FooBar != foobar"):
        validate_id("FooBar")


def test_file_name_suffix_message():
    with pytest.raises(ValidationError, match="should end in .star: 'foo_bar'"):
        validate_file_name("foo_bar")


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        validate_package_name("")