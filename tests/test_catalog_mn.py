from appregistry.catalog_mn import manifests
from appregistry.validate import ValidationError


def _by_id():
    return {m.id: m for m in manifests()}


def test_catalog_size_and_unique_ids():
    apps = manifests()
    assert len(apps) == 25
    assert len({m.id for m in apps}) == len(apps)
    assert len({m.package_name for m in apps}) == len(apps)


def test_every_manifest_validates():
    failures = []
    for m in manifests():
        try:
            m.validate()
        except ValidationError as exc:
            failures.append((m.id, str(exc)))
    assert failures == []


def test_ordered_by_package_name():
    names = [m.package_name for m in manifests()]
    assert names == sorted(names)


def test_package_name_is_id_without_dashes():
    for m in manifests():
        assert m.package_name == m.id.replace("-", "")


def test_file_names_are_star_sources():
    for m in manifests():
        assert m.file_name.endswith(".star")


def test_mbta_entry():
    mbta = _by_id()["mbta"]
    assert mbta.name == "MBTA"
    assert mbta.summary == "MBTA departures"
    assert mbta.desc == "MBTA bus and rail departure times."
    assert mbta.file_name == "mbta.star"
    assert mbta.package_name == "mbta"


def test_natdex_entry_has_name_unlike_id():
    natdex = _by_id()["natdex"]
    assert natdex.name == "National Pokedex"
    assert natdex.summary == "Display random Pokemon"


def test_mind_the_gap_file_name():
    assert _by_id()["mind-the-gap"].file_name == "mind_the_gap.star"


def test_to_dict_leaves_out_source():
    for m in manifests():
        data = m.to_dict()
        assert "source" not in data
        assert data["id"] == m.id
        assert data["package_name"] == m.package_name


def test_manifests_returns_fresh_objects():
    first = manifests()
    first[0].name = "Changed"
    first.clear()
    second = manifests()
    assert second[0].name == "MBTA"
    assert len(second) == 25