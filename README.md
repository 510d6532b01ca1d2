# practicekit

A collection of small, self-contained building blocks.

| Module | What it holds |
| --- | --- |
| `practicekit.numbers` | `hex_string`, `oct_string`, `bin_string`, `factorial`, `fibonacci` |
| `practicekit.money` | `Money` (whole units and cents) and `Person` |
| `practicekit.shapes` | `Shape`, `Triangle`, `Square`, and `Dog`, `Cat` with `walk` |
| `practicekit.deck` | `Card`, `Deck`, `init_deck`, `shuffle`, text and binary file storage |
| `practicekit.search` | `binary_search`, `linear_search`, `concurrent_linear_search` |
| `practicekit.iterators` | `SliceIterator`, `filter_yield`, `filter_slice` |
| `practicekit.stack` | `FuncStack` and `ConsumingStack` |
| `practicekit.unique_queue` | `UniqueQueue` and `SqlBuilder` |
| `practicekit.envfile` | `parse_env` and `source_env` for `KEY=VALUE` files |
| `practicekit.api` | `Request`, `Response`, `Router`, `Api`, `wsgi_app`, problem and JSON replies |
| `practicekit.middleware` | `content_is_json` and `logger` |
| `practicekit.hateoas` | `Link` and `Hateoas` |
| `practicekit.animal_csv` | `Animal`, `get_all_animals`, `get_animal` |
| `practicekit.movies` | discovery, models, repositories, controllers, handlers, gateways, and a rating server |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Helpers and data structures

```python
from practicekit.numbers import bin_string, factorial, fibonacci

bin_string(10)   # "1010"
factorial(5)     # 120
fibonacci(10)    # 55
```

`Money(large, small)` keeps whole units in 64 unsigned bits and cents in 8,
wrapping as those sizes do. `add` carries cents above 100 into whole units;
`remove` empties the amount when more is removed than it holds. `str(money)`
gives `"large,small"`, and `str(person)` gives `"name last_name - large,small"`.

A deck holds the numbers 1 to 10 in Spades, Diamonds, Hearts and Clubs:

```python
import random
from practicekit.deck import init_deck, read_from_file, shuffle

deck = init_deck()             # 40 cards
hand = deck.deal(5)            # removes and returns the first five
mixed = shuffle(deck, random.Random(1))
deck.save_to_file("deck.txt")  # one "num of name" line per card
again = read_from_file("deck.txt")
```

Dealing a negative number of cards, or more than the deck holds, raises
`ValueError`. `save_to_bin_file` and `read_from_bin_file` use a compact binary
format of the package's own.

`binary_search`, `linear_search` and `concurrent_linear_search` return the
index of the target or `None`. `binary_search` stops once the middle of its
window sits at offset 1, so it can miss values next to its last probe;
`concurrent_linear_search` scans both halves of the list in two threads.

```python
from practicekit.iterators import SliceIterator, filter_slice, filter_yield

evens = filter_slice([1, 2, 3, 4, 5, 6, 7, 8], lambda v: v % 2 == 0)
lazy = list(filter_yield(range(10), lambda v: v > 6))

cursor = SliceIterator([1, 2, 3, 4])
while cursor.advance():        # starts at the second element
    print(cursor.filter_current(lambda v: v % 2 == 0))
```

`FuncStack` holds callables; its first entry is the base and `pop` raises
`IndexError` rather than remove it. `ConsumingStack` marks items consumed
instead of removing them, so repeated `pop` calls cycle through it. Both have
a `listing()` that describes every entry with its neighbours.

`UniqueQueue` is first in, first out and ignores a value it already holds;
`get` returns `""` when empty. `SqlBuilder.build_sql()` drains the queue into
its text, ends it with `;` and returns the text so far.

`parse_env(text)` reads `KEY=VALUE` lines, dropping everything from `#` to the
end of a line and ignoring blank lines; a line without `=` raises
`ValueError`. `source_env(path=".env")` reads and parses a file.

`get_all_animals(path="data/animal.csv")` reads `id;name;icon` lines after a
header line (a trailing empty line is an error); `get_animal(animal_id, path)`
returns the matching `Animal` or `None`.

## A WSGI API

```python
from practicekit.api import Api, as_json
from practicekit.middleware import content_is_json, logger

app = Api()
app.use(content_is_json)
app.use(logger)  # the last middleware added runs first

def get_animal(request, response):
    as_json(response, {"id": request.form_value("animalId")})

app.get("/animals/{animalId}", get_animal)
```

`Api` is a WSGI application, so any WSGI server can run it, for example
`wsgiref.simple_server.make_server("", 4500, app)`. Handlers are called as
`handler(request, response)`.

- Numbers and UUIDs in a request path fill the `{name}` parts of the pattern
  (two by default; change it with `set_id_number`) and are read with
  `request.form_value(name)`, which also reads query and form values.
- An unknown path gets a JSON "not found" problem reply; `set_not_found`
  replaces that handler.
- A known path asked with another method gets 405 with an `Allow` header.
- `not_found`, `not_allowed`, `bad_request`, `internal_error` and
  `as_json_error` write `application/problem+json` bodies. `internal_error`'s
  body reports 500 while its status line is 405.
- `content_is_json` answers 400 to requests whose Content-Type is set to
  anything but `application/json`; `logger` logs method, path and duration
  through the `logging` module.

`Hateoas` collects `Link`s to the requested URI (`self_get`, `self_put`,
`self_delete`, `list_self_post`) or to one item of a listed collection
(`list_self_get`, `list_self_put`, `list_self_delete`); `list_self_post`
records its link with the DELETE action. A dataclass inheriting from it is
written by `as_json` with a `links` list.

## Movie services

`practicekit.movies` holds the parts of three cooperating services:

- `discovery`: the `Registry` interface, `generate_instance_id`, and
  `MemoryRegistry`, which skips instances that have not reported within five
  seconds (`report_healthy_state`) and raises `ServiceNotFoundError` when none
  are left.
- `models`: `Metadata`, `MovieDetails` (rating left out of its JSON form when
  there is none) and `Rating`.
- `repository`: in-memory `MetadataRepository` and `RatingRepository`, raising
  `RecordNotFoundError`.
- `controllers`: `MetadataController`, `RatingController` (the mean of the
  stored values) and `MovieController`, which combines metadata and rating.
- `handlers`: `MetadataHandler.get_metadata`, `MovieHandler.get_movie_details`
  and `RatingHandler.handle`, each a `handler(request, response)`.
- `gateways`: `MetadataGateway` and `RatingGateway`, which pick an address
  from a registry and call the services over HTTP with `requests`.

### The rating server

```
practicekit-rating-server --port 8082
```

It listens on port 8082 by default (`--host` sets the address) and keeps
ratings in memory:

- `GET /rating?id=<record>&type=<type>` returns the average rating as JSON, or
  404 when the record has none.
- `PUT /rating?id=<record>&type=<type>&userId=<user>&value=<number>` stores a
  rating; a value that is not a number answers 400.
- A missing `id` or `type`, or any other method, answers 400. Other paths
  answer 404.

`create_app()` returns the same WSGI application for use with another server.

### Serving metadata and movies yourself

Only the rating service has a command. The metadata and movie handlers are
wired by hand, for example:

```python
from wsgiref.simple_server import make_server

from practicekit.api import wsgi_app
from practicekit.movies.controllers import MetadataController
from practicekit.movies.handlers import MetadataHandler
from practicekit.movies.models import Metadata
from practicekit.movies.repository import MetadataRepository

repo = MetadataRepository()
repo.put("1", Metadata(id="1", title="Example", director="Someone"))
handler = MetadataHandler(MetadataController(repo))
make_server("", 8081, wsgi_app(handler.get_metadata)).serve_forever()
```

A movie service is built the same way from
`MovieController(RatingGateway(registry), MetadataGateway(registry))` and
`MovieHandler`, where `registry` knows the addresses of the other two.

## What it does not do

- Service discovery is in memory only: there is no registry server shared
  between processes, and nothing reports health on a timer for you.
- Metadata and ratings live in memory and are lost when the process stops;
  there is no database storage.
- There is no command for the metadata or movie services, nor for an API
  built with `Api`; they run under a WSGI server you choose.