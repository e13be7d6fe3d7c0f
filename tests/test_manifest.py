import dataclasses

import pytest

from appregistry.manifest import (
    Manifest,
    generate_file_name,
    generate_id,
    generate_package_name,
)
from appregistry.validate import ValidationError

SOURCE = b'load("render.star", "render")\n\ndef main():\n    return render.Root(child = render.Text("foo"))\n'


def _foo_tracker(source=b""):
    return Manifest(
        id="foo-tracker",
        name="Foo Tracker",
        summary="Track realtime foo",
        desc="The foo tracker provides realtime feeds for foo.",
        author="Tidbyt",
        file_name="foo_tracker.star",
        package_name="footracker",
        source=source,
    )


def test_manifest_source_matches_file(tmp_path):
    path = tmp_path / "source.star"
    path.write_bytes(SOURCE)
    m = _foo_tracker(source=path.read_bytes())
    assert m.source == SOURCE


@pytest.mark.parametrize(
    "value, want",
    [
        ("Cool App", "coolapp"),
        ("CoolApp", "coolapp"),
        ("cool-app", "coolapp"),
        ("cool_app", "coolapp"),
    ],
)
def test_generate_package_name(value, want):
    assert generate_package_name(value) == want


@pytest.mark.parametrize(
    "value, want",
    [
        ("Cool App", "cool_app.star"),
        ("CoolApp", "coolapp.star"),
        ("cool-app", "cool_app.star"),
        ("cool_app", "cool_app.star"),
    ],
)
def test_generate_file_name(value, want):
    assert generate_file_name(value) == want


@pytest.mark.parametrize(
    "value, want",
    [
        ("Cool App", "cool-app"),
        ("CoolApp", "coolapp"),
        ("cool-app", "cool-app"),
        ("cool_app", "cool-app"),
    ],
)
def test_generate_id(value, want):
    assert generate_id(value) == want


def test_generators_collapse_whitespace():
    assert generate_id("  Word  of\tthe Day ") == "word-of-the-day"
    assert generate_file_name("  Word  of\tthe Day ") == "word_of_the_day.star"
    assert generate_package_name("  Word  of\tthe Day ") == "wordoftheday"


def test_validate_accepts_good_manifest_and_rejects_bad_field():
    m = _foo_tracker()
    assert m.validate() is None
    bad = dataclasses.replace(m, summary="track realtime foo")
    with pytest.raises(ValidationError, match="uppercased character"):
        bad.validate()


def test_validate_reports_id_before_other_fields():
    m = dataclasses.replace(_foo_tracker(), id="Foo", name="foo")
    with pytest.raises(ValidationError, match="ids should be lower case"):
        m.validate()


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"name": ""}, "name cannot be empty"),
        ({"desc": "No punctuation"}, "should end in punctuation"),
        ({"author": ""}, "author cannot be empty"),
        ({"file_name": "foo_tracker"}, "should end in .star"),
        ({"package_name": "foo_tracker"}, "package names can only contain"),
    ],
)
def test_validate_field_errors(changes, message):
    m = dataclasses.replace(_foo_tracker(), **changes)
    with pytest.raises(ValidationError, match=message):
        m.validate()


def test_generated_fields_validate():
    name = "Cool App"
    m = Manifest(
        id=generate_id(name),
        name=name,
        summary="A cool app",
        desc="A really cool app.",
        author="Someone",
        file_name=generate_file_name(name),
        package_name=generate_package_name(name),
    )
    assert (m.id, m.file_name, m.package_name) == ("cool-app", "cool_app.star", "coolapp")
    assert m.validate() is None


def test_to_dict_omits_source():
    m = _foo_tracker(source=SOURCE)
    assert m.to_dict() == {
        "id": "foo-tracker",
        "name": "Foo Tracker",
        "summary": "Track realtime foo",
        "desc": "The foo tracker provides realtime feeds for foo.",
        "author": "Tidbyt",
        "file_name": "foo_tracker.star",
        "package_name": "footracker",
    }


def test_source_defaults_to_empty_bytes():
    assert _foo_tracker().source == b""