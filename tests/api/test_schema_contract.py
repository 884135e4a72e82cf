from __future__ import annotations

import pytest
from graphql import GraphQLEnumType, GraphQLObjectType, build_schema, print_type
from graphql.pyutils import Undefined

from phonebook_api.graphql.schema import schema, validate_schema

CONTRACT_SDL = """
type Address {
  street: String!
  city: String!
}

type Person {
  name: String!
  phone: String
  address: Address!
  id: ID!
}

enum YesNo {
  YES
  NO
}

type Query {
  personCount: Int!
  allPersons(phone: YesNo): [Person!]!
  findPerson(name: String!): Person
}

type Mutation {
  addPerson(name: String!, phone: String, street: String!, city: String!): Person
  editNumber(name: String!, phone: String!): Person
}
"""


def _field_types(type_name: str) -> dict:
    gql_type = schema._schema.get_type(type_name)
    assert isinstance(gql_type, GraphQLObjectType)
    return {name: str(field.type) for name, field in gql_type.fields.items()}


def _arg_types(type_name: str, field_name: str) -> dict:
    field = schema._schema.get_type(type_name).fields[field_name]
    return {name: str(arg.type) for name, arg in field.args.items()}


def test_validate_schema_passes() -> None:
    validate_schema()  # should not raise


def test_address_type() -> None:
    assert _field_types("Address") == {"street": "String!", "city": "String!"}


def test_person_type_hides_stored_address_parts() -> None:
    assert _field_types("Person") == {
        "name": "String!",
        "phone": "String",
        "address": "Address!",
        "id": "ID!",
    }
    assert list(_field_types("Person")) == ["name", "phone", "address", "id"]


def test_yes_no_enum() -> None:
    enum_type = schema._schema.get_type("YesNo")
    assert isinstance(enum_type, GraphQLEnumType)
    assert list(enum_type.values) == ["YES", "NO"]


def test_query_type() -> None:
    assert _field_types("Query") == {
        "personCount": "Int!",
        "allPersons": "[Person!]!",
        "findPerson": "Person",
    }
    assert _arg_types("Query", "allPersons") == {"phone": "YesNo"}
    assert _arg_types("Query", "findPerson") == {"name": "String!"}


@pytest.mark.parametrize(
    ("field_name", "args"),
    [
        (
            "addPerson",
            {"name": "String!", "phone": "String", "street": "String!", "city": "String!"},
        ),
        ("editNumber", {"name": "String!", "phone": "String!"}),
    ],
)
def test_mutation_type(field_name: str, args: dict) -> None:
    assert _field_types("Mutation")[field_name] == "Person"
    assert _arg_types("Mutation", field_name) == args
    assert list(_arg_types("Mutation", field_name)) == list(args)


@pytest.mark.parametrize("type_name", ["Address", "Person", "YesNo", "Query", "Mutation"])
def test_printed_schema_matches_contract(type_name: str) -> None:
    published = build_schema(schema.as_str())
    contract = build_schema(CONTRACT_SDL)
    assert print_type(published.get_type(type_name)) == print_type(contract.get_type(type_name))


def test_optional_arguments_have_no_default() -> None:
    sdl = schema.as_str()
    assert "allPersons(phone: YesNo): [Person!]!" in sdl
    assert "= null" not in sdl
    for type_name, field_name, arg_name in [
        ("Query", "allPersons", "phone"),
        ("Mutation", "addPerson", "phone"),
    ]:
        arg = schema._schema.get_type(type_name).fields[field_name].args[arg_name]
        assert arg.default_value is Undefined
