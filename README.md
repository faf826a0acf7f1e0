# univeasier

A small HTTP API that stores and serves university records (people,
interests, university types and a simple test table) from a MySQL
database. Records are checked before they are written. Reads and writes
call stored procedures on the database side.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Configuration

The server reads a JSON configuration file. Keys are matched without
regard to case, and unknown keys are ignored:

```json
{
  "server": {
    "host": "localhost",
    "port": "8080"
  },
  "db": {
    "driver": "mysql",
    "name": "univeasier",
    "username": "user",
    "password": "password",
    "protocol": "tcp",
    "host": "localhost",
    "port": "3306"
  }
}
```

`driver` must be `mysql`. When `protocol` is `unix`, `host` is taken as
the path of the MySQL socket. Otherwise `host` and `port` are used for a
TCP connection.

## Running

```
univeasier --config /path/to/config.json
```

When `--config` is not given, the path is taken from the `CONFIG`
environment variable:

```
CONFIG=/path/to/config.json univeasier
```

The command reads the configuration, opens the database connection and
checks it, builds the routes, and then listens on all interfaces
(`0.0.0.0`) at the configured port. It logs to standard error at debug
level. If the configuration cannot be read or the database cannot be
reached, the command logs the error and exits with status 1.

Requests from any origin are answered with
`Access-Control-Allow-Origin: *`. Preflight requests are accepted for the
`GET`, `POST`, `PUT` and `DELETE` methods and for the `X-Requested-With`,
`Content-Type` and `Authorization` headers.

## Routes

| Method | Path                    | Result                                  |
|--------|-------------------------|-----------------------------------------|
| GET    | `/person/{id}`          | one person as JSON                      |
| GET    | `/person`               | every person as a JSON list             |
| POST   | `/person`               | validate and add a person               |
| GET    | `/interest/{id}`        | one interest as JSON                    |
| GET    | `/interest`             | every interest as a JSON list           |
| POST   | `/interest`             | validate and add an interest            |
| GET    | `/typeUniversity/{id}`  | one university type as JSON             |
| GET    | `/typeUniversity`       | every university type as a JSON list    |
| POST   | `/typeUniversity`       | validate and add a university type      |
| GET    | `/test/{name}`          | one test record by name                 |
| GET    | `/test`                 | every test record                       |
| POST   | `/test`                 | add a test record (not validated)       |

A successful `POST` answers with status 200 and a short plain-text
confirmation. An `{id}` that is not a decimal integer answers with status
404. Any other failure answers with status 500, and the error message is
sent as plain text. A list route with no records answers `null`.

## Data formats

Nullable fields are written as JSON `null` when they are empty.
Timestamps use RFC 3339, for example `"2019-11-01T15:04:05Z"`. Byte
fields (`avatar`, `doc_verifier`) are base64 text.

Gender, person type and verification status are written as integers:

- gender: `0` MALE, `1` FEMALE, `2` OTHER
- person type: `0` VISITOR, `1` STUDENT, `2` GRADUATED, `3` PROFESSOR
- status: `0` UNVERIFIED, `1` PENDING, `2` VERIFIED

`univeasier.enums` converts these values to and from their names
(`to_gender`, `gender_to_string` and the like).

## Using the library

The building blocks can be used on their own.

- `univeasier.sqlquery` builds `SELECT`, `UPDATE` and `DELETE` statements
  over a table. `new_query` looks the table's columns up in the database.

  ```python
  from univeasier.config import read_configuration
  from univeasier.connection import init_connection
  from univeasier.sqlquery import new_query
  from univeasier.sqltypes import Comparator

  conn = init_connection(read_configuration("config.json"))
  query = new_query(conn, "tabletest", "SELECT")
  query.add_column_headers("name", "email")
  query.add_filter("age", Comparator.GREATER, 18)
  query.add_and_filter("name", Comparator.EQUAL, "juana")
  print(query.to_sql())
  ```

  `SQLQuery` can also be built directly from a list of column names,
  without a database.

- `univeasier.models` holds `Person`, `Interest`, `TypeUniversity` and
  `TableTest`. Each has `from_dict`, `to_dict` and `validate`. Validation
  raises one of the exceptions in `univeasier.errors`, or `ValueError` for
  `TableTest`.
- `univeasier.nullable` holds the nullable values `NullInt32`,
  `NullInt64`, `NullFloat64`, `NullString` and `NullTime`. Each has
  `from_json`, `to_json` and `is_null`.
- `univeasier.services` and `univeasier.dao` hold the operations behind
  each route. They take an open database connection.
- `univeasier.api.create_app(conn)` returns the Flask application without
  CORS handling. `univeasier.server.Server` adds the configuration, the
  connection and CORS.

## What it does not do

- It does not create the database schema or the stored procedures
  (`InsertPerson`, `GetPersonById`, `GetListPerson` and the matching ones
  for interests, university types and the test table). They must already
  exist in the database.
- There are no `PUT` or `DELETE` routes. Records cannot be updated or
  removed through the API, even though CORS allows those methods.
- The other records in `univeasier.entities` (`University`, `Faculty`,
  `Career`, `Course`, `Story` and the rest) are data classes only.
  `to_json_dict` turns them into JSON-ready dictionaries, but they have no
  routes and no storage.