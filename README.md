# plumlabs

A small article publishing service. Upload a Markdown file and plumlabs
converts it to HTML, stores it in a SQLite database and serves it back to an
HTMX front end through a WSGI application.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the back end

```
plumlabs
```

The command reads the port from a `.env` file (the `PORT` setting; a `PORT`
already set in the environment takes precedence). It stops with an error when
the file is missing or `PORT` is empty. Options:

| Option         | Default      | Meaning                                   |
|----------------|--------------|-------------------------------------------|
| `--env-file`   | `.env`       | File holding the `PORT` setting           |
| `--database`   | `storage.db` | SQLite database file (created if missing) |
| `--templates`  | `templates`  | Directory of Jinja2 `*.html` templates    |
| `--static`     | `static`     | Directory served for every other path     |

The templates directory must hold at least one `*.html` file; the endpoints
use `article.html` (rendered with `HTMLContent`, the article's HTML, already
marked safe) and `articles.html` (rendered with `Titles`, a list of strings).
Templates are autoescaped and have a `safeHTML` filter.

The server listens on all interfaces and shuts down cleanly on Ctrl-C or
SIGTERM.

### Endpoints

| Path                    | Method | Purpose                                                              |
|-------------------------|--------|----------------------------------------------------------------------|
| `/api/upload`           | POST   | Multipart upload, field `file`                                       |
| `/api/article/delete`   | POST   | Form field `title` (or query `title`); removes the article; OPTIONS answers 200 |
| `/api/articles/getall`  | GET    | Renders `articles.html` with all titles                              |
| `/api/article/get`      | GET    | Query `title`; renders `article.html`, or 404 if there is no such article |
| any other path          | GET    | Static files from the static directory, with directory listings      |

An upload's title is its file name up to the last dot. A new title is only
accepted from a `.md` file; other new files are ignored. A file whose title
already exists updates that article, whatever its extension. Every endpoint
answers with permissive CORS headers.

## Running the front end

A plain static file server, by default for the current directory on port 2113:

```
plumlabs-front --port 2113 --directory .
```

## Using it as a library

```python
from plumlabs.conversion import markdown_to_html

html = markdown_to_html("# Hello\n- one\n- two\n")
```

Empty input raises `plumlabs.conversion.ConversionError`.

The converter understands a compact Markdown dialect:

- `#` at the start of a header line, `>` for a quoted line
- `-` list items on consecutive lines
- fenced code between triple backticks
- `*italic*` or `_italic_`, `**bold**`, `~~~strike~~~`
- `[text](url)` links and `![alt](src)` images (the rest of that line is
  dropped)

The pieces are also usable on their own: `plumlabs.lexer.Lexer`,
`plumlabs.parser.Parser`, `plumlabs.renderer.Renderer`. Storage lives in
`plumlabs.storage` (`open_database`, `insert_article`, `get_article_by_title`,
`get_all_articles`, `update_article`, `delete_article`, raising
`ArticleNotFound` on failed lookups), and `plumlabs.manager.ArticleManager`
ties uploads to storage. `plumlabs.server.Server` and
`plumlabs.frontend.create_app` are WSGI applications that can be mounted in
any WSGI server. `plumlabs.middleware` offers `logging_middleware` and
`cors_middleware` wrappers.

## What it does not do

The package ships no templates and no front-end pages: the `templates/` and
static directories are supplied by you. There is no authentication; anyone
who can reach the server can upload and delete articles.