# notefinder

notefinder collects notes from several places into one in-memory store and
searches them:

- directories of files, where each file is a note. A file whose name starts
  with a dot is marked archived. Vim swap files are skipped. A file that
  contains a NUL byte becomes a "file" note, with a `file://` URI and a MIME
  type guessed from its first bytes;
- Firefox bookmarks, read from each profile's `places.sqlite`. The database is
  opened read-only and immutable, so a running browser's lock does not get in
  the way.

Searches ignore case and look in note titles and bodies.

## Installation

```
pip install .
```

## Configuration

Notebooks are listed in `~/.config/notefinder.ini`, with one section per
notebook:

```ini
[notes]
path = /home/me/notes

[archive]
impl = file
path = /home/me/old-notes
```

The `impl` key picks the back end: `file`, `mozilla` or `google`. A section
that has a `path` and no `impl` is a `file` notebook. A section with an unknown
`impl` is kept, but it has no back end, and using it raises
`NotSupportedError`. The `google` back end holds no notes and refuses every
change.

The command also adds Firefox profiles on its own. It looks for directories
under `~/.mozilla/firefox` whose name contains `default` and that hold a
`places.sqlite`.

## Running

```
notefinder [QUERY] [-c CONFIG] [-n NOTEBOOK] [--no-discover] [-v]
```

The command reads the configuration, adds any Firefox bookmark notebooks, and
loads every notebook once. It then prints each matching note, sorted by
identifier, as its title and a short detail separated by a tab. The last line
gives the number of results. With no query, every note is listed.

- `-c`, `--config`: read this configuration file instead of the default one.
- `-n`, `--notebook`: search only the notebook with this name.
- `--no-discover`: do not add Firefox bookmark notebooks.
- `-v`, `--verbose`: log progress.

The command exits with status 1 in two cases: the configuration cannot be
read, or the named notebook does not exist.

## Using the library

```python
from notefinder.config import Context, read_config
from notefinder.store import Query
from notefinder.worker import Worker

context = Context(read_config())
worker = Worker(context)
worker.load_all()
for note in context.store.query_stream(Query(needle="groceries")):
    print(note.title, note.matching_fields)
```

The modules are:

- `notefinder.note`: `Note`, `Flag`, `NoteType` and `Markup`. `Note.words()`
  counts the stems of the words in a note's title and body.
- `notefinder.stemming`: a Paice/Husk stemmer. `default_rule_table()` returns
  the shared English rule table, and `RuleTable.stem()` reduces a word.
- `notefinder.notebook`: `Notebook`, the abstract `Implementation` base class
  and `NotSupportedError`.
- `notefinder.file_backend`, `notefinder.mozilla`, `notefinder.google`: the
  back ends. Only the file back end can create, update and delete notes.
- `notefinder.store`: `Store`, `Query` and `NoteKey`. `Store.query_stream()`
  yields the matching notes and fills in `matching_fields`. `Store.query()`
  returns everything in a notebook.
- `notefinder.worker`: `Worker`. `sync_notebook()` adds, replaces and removes
  store entries so that they match a notebook. `load_all()` does this for every
  notebook in parallel. `run()` keeps reloading on an interval, 10 seconds by
  default, and between reloads serves `Request.LOAD_DATA` and `Request.STOP`
  from `Context.requests`.
- `notefinder.text`: `short_text()`, which shortens the first line of a text
  for display.
- `notefinder.l10n`: `Localizer` and `l10n()`. If the `NF_MAKE_L10N`
  environment variable is set, any string not yet in `translation.json` is
  added to it.

## What it does not do

The command only searches. It does not create, edit or delete notes; to do
that, call the back ends' methods from the library. Nothing is saved between
runs: the store lives in memory and is rebuilt from the notebooks each time.
There is no graphical interface, no full-text index, and no search inside the
contents of PDF or other binary files.

## Tests

```
pip install .[test]
pytest
```