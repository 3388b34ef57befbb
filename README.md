# portfolio_site

The backend of a personal portfolio website. It is a small WSGI application
with a health check and read-only content routes. It also has the data classes
that describe the portfolio's content. It needs only the Python standard
library and runs on Python 3.10 and later.

## Installation

```
pip install .
```

## Command line

The `portfolio-site` command takes one subcommand:

```
portfolio-site start [-b BINDING] [-p PORT]   # serve with wsgiref (default localhost:5150)
portfolio-site routes                          # print each route as "[METHOD] path"
portfolio-site version                         # print the application version
```

`version` prints `0.1.0 (<revision>)`. The revision comes from the `BUILD_SHA`
environment variable or, if that is unset, from `GITHUB_SHA`. If neither is
set it is `dev`.

## Endpoints

| Method | Path                         | Response                                       |
|--------|------------------------------|------------------------------------------------|
| GET    | `/api/healthcheck`           | JSON with `message`, `status` and `timestamp`  |
| GET    | `/api/v1/education`          | `Get all educations`                           |
| GET    | `/api/v1/education/{id}`     | `Get education with id {id}`                   |
| GET    | `/api/v1/jobs`               | `Get all jobs`                                 |
| GET    | `/api/v1/jobs/{id}`          | `Get job with id {id}`                         |
| GET    | `/api/v1/projects`           | `Get all projects`                             |
| GET    | `/api/v1/projects/{id}`      | `Get project with id {id}`                     |
| GET    | `/api/v1/skills`             | `Get all skills`                               |
| GET    | `/api/v1/skills/{name}`      | `Get skill with name {name}`                   |
| GET    | `/api/v1/testimonials`       | `Get all testimonials`                         |
| GET    | `/api/v1/testimonials/{id}`  | `Get testimonial with id {id}`                 |

The health check returns
`{"message": "Status is healthy!", "status": 200, "timestamp": ...}`. The
timestamp is the current UTC time in ISO 8601 format.

- **Path parameters.** Every path parameter, `{name}` included, must be an
  unsigned 32-bit integer. Any other value gets a `400` text response that
  begins with `Invalid URL:`.
- **HEAD requests.** `HEAD` is answered wherever `GET` is, with an empty body.
- **Other methods.** A known path requested with another method gets `405`,
  with an `Allow` header.
- **Unknown paths.** These get `404`.

## Using the application in code

```python
from portfolio_site.app import create_app

app = create_app()
response = app.handle("GET", "/api/healthcheck")
print(response.status, response.json_body())
```

`App` is a WSGI callable, so any WSGI server can host it. You can also build an
`App` from your own `portfolio_site.controllers.Route` objects.

### Modules

- **`portfolio_site.controllers`**
  - `Response` holds the status, body and content type.
  - `Route` holds a method, a path pattern and a handler. `Route.match`
    returns the captured parameters.
  - `healthcheck`, `healthcheck_routes` and `structure_routes` provide the
    handlers and routes listed above.
- **`portfolio_site.views`**
  - `HomeResponse` converts with `to_dict()` and `from_dict()`. `from_dict`
    raises `ValueError` if `app_name` is missing or is not a string.
- **`portfolio_site.base`**
  - `ObjRef` is a reference to the object store.
  - `HtmlElement` and `ImageElement` are rich-content blocks.
  - `Base` holds the bookkeeping fields: id, timestamps, author and active
    flag.
  - `AttachmentKind` and `AttachmentType` describe attachments. Use
    `AttachmentType.other(...)` for custom kinds.
  - Timestamps must be timezone-aware. They are stored in UTC.
- **`portfolio_site.entities`**
  - Skills: `Skill` has a `SoftSkill`, `Technology` or `Tool` category and an
    optional proficiency from 0 to 255.
  - Companies: `Company` and `CompanyType`.
  - Content: `Asset`, `Blog`, `Education` with its `Module`s, `Job`,
    `Project`, and `Testimonial`.
  - `Project` has a status: `Planning`, `Designing`, `Developing`, `Released`
    or `Updating`.
  - `Testimonial` has an author: `Individual` or `CompanyRepresentative`.

## What the package does not do

- **No storage.** The entity classes are in-memory data classes. Nothing saves
  or loads them.
- **Fixed responses.** The content routes return fixed text messages. They do
  not return entity data.
- **Development server only.** The server started by `portfolio-site start` is
  the standard library's development server.

## Running the tests

```
pip install ".[test]"
pytest
```