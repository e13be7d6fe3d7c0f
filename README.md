# appregistry

`appregistry` describes small display applets with a `Manifest` record,
derives an applet's identifiers from its display name, and checks that each
manifest field follows the catalogue's naming and wording rules. It also
ships a ready-made catalogue of applet manifests.

It has no runtime dependencies.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The manifest

`appregistry.manifest.Manifest` is a dataclass with the fields `id`, `name`,
`summary`, `desc`, `author`, `file_name`, `package_name` and `source`
(bytes, empty by default and left out of the repr).

- `Manifest.validate()` runs every field check in that order (id, name,
  summary, desc, author, file name, package name) and raises
  `ValidationError` at the first failure.
- `Manifest.to_dict()` returns every field except `source` as a plain
  dictionary, ready for serialising.

## Deriving names

An applet's display name determines its identifier, its source file name and
its package name:

```python
from appregistry.manifest import generate_id, generate_file_name, generate_package_name

generate_id("Cool App")            # "cool-app"
generate_file_name("Cool App")     # "cool_app.star"
generate_package_name("Cool App")  # "coolapp"
```

`generate_id` turns underscores and runs of whitespace into dashes,
`generate_file_name` turns dashes and whitespace into underscores and adds
`.star`, and `generate_package_name` drops dashes, underscores and
whitespace. All three lower-case the result.

## Validating fields

Each field has its own check in `appregistry.validate`. A check returns
nothing when the value is acceptable and raises `ValidationError` (a
subclass of `ValueError`) when it is not:

```python
from appregistry.validate import ValidationError, validate_name, validate_summary

validate_name("Cool App")          # fine

try:
    validate_summary("A cool app.")
except ValidationError as err:
    print(err)                     # app summaries should not end in punctuation
```

The rules, briefly:

- **`validate_name`**: not empty; title case, where the words "an", "on",
  "the", "to" and "of" may stay lower case; at most 17 bytes in UTF-8.
- **`validate_summary`**: not empty; at most 27 bytes in UTF-8; does not end
  in `.`, `!` or `?`; the first word starts with a capital.
- **`validate_desc`**: not empty; ends in `.`, `!` or `?`; the first word
  starts with a capital.
- **`validate_author`**: not empty.
- **`validate_id`**: not empty; lower case; letters, digits and dashes only.
- **`validate_file_name`**: not empty; ends in `.star`; the part before it
  is lower case and holds only letters, digits and underscores.
- **`validate_package_name`**: not empty; lower case; letters and digits
  only.

The limits are available as `MAX_NAME_LENGTH` (17) and `MAX_SUMMARY_LENGTH`
(27).

## The catalogue

The bundled manifests are split across four modules by alphabetical range
of the applet's package name: `catalog_mn` (MBTA to NYC Bus), `catalog_os`
(OGS Games Viewer to Sports Standings), `catalog_st` (SpotTheStation to
Tube) and `catalog_tw` (Tube Status to World Clock). Each module has a
`manifests()` function that returns a fresh list of `Manifest` objects:

```python
from appregistry import catalog_mn, catalog_os, catalog_st, catalog_tw

every_app = [
    *catalog_mn.manifests(),
    *catalog_os.manifests(),
    *catalog_st.manifests(),
    *catalog_tw.manifests(),
]

by_id = {app.id: app for app in every_app}
print(by_id["world-clock"].to_dict())
```

## What it does not do

- There is no command-line tool: nothing here prompts for a new applet,
  creates or removes applet directories, or writes an applet list to disk.
- The bundled manifests carry no applet source; their `source` field is
  empty.
- There is no single function that gathers the whole catalogue or looks an
  applet up by id; combine the four `manifests()` lists as shown above.