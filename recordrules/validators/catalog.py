"""Rule tables for the request records, keyed by record type.

Built once at import; the default engine registers every entry of
DEFAULT_SCHEMAS.
"""

from recordrules.models.requests import (
    AddressRequest,
    CreateCategoryRequest,
    LoginRequest,
    Product,
    ProductVariant,
    RegisterUserRequest,
)
from recordrules.validators.field_rules import Custom, Length, Nested, Range
from recordrules.validators.predicates import (
    can_register,
    not_blank,
    password_equals_confirm_password,
)
from recordrules.validators.record_rules import ContextRule, SchemaRule
from recordrules.validators.schema import FieldSpec, RecordSchema

LOGIN_SCHEMA = RecordSchema(
    "LoginRequest",
    fields=[
        FieldSpec("username", [Length(min=3, max=20, message="username length must be between 3 and 20")]),
        FieldSpec("password", [Length(min=3, max=20, message="password length must be between 3 and 20")]),
    ],
)

ADDRESS_SCHEMA = RecordSchema(
    "AddressRequest",
    fields=[
        FieldSpec("street", [Length(min=1, max=100)]),
        FieldSpec("city", [Length(min=1, max=100)]),
        FieldSpec("country", [Length(min=1, max=100)]),
    ],
)

REGISTER_USER_SCHEMA = RecordSchema(
    "RegisterUserRequest",
    fields=[
        FieldSpec("username", [Length(min=3, max=20, code="username")]),
        FieldSpec("password", [Length(min=3, max=20, code="password")]),
        FieldSpec("confirm_password", [Length(min=3, max=20, code="confirm_password")]),
        FieldSpec("name", [Length(min=3, max=100, code="name")]),
        FieldSpec("address", [Nested(ADDRESS_SCHEMA)]),
    ],
    rules=[
        SchemaRule(
            password_equals_confirm_password,
            field="password",
            message="password != confirm password",
            skip_on_field_errors=False,
        ),
        ContextRule(
            can_register,
            field="username",
            skip_on_field_errors=False,
        ),
    ],
)

CREATE_CATEGORY_SCHEMA = RecordSchema(
    "CreateCategoryRequest",
    fields=[
        FieldSpec("id", [Custom(not_blank)]),
        FieldSpec("name", [Custom(not_blank)]),
    ],
)

PRODUCT_VARIANT_SCHEMA = RecordSchema(
    "ProductVariant",
    fields=[
        FieldSpec("name", [Length(min=3, max=100)]),
        FieldSpec("price", [Range(min=12, max=100_000_000)]),
    ],
)

PRODUCT_SCHEMA = RecordSchema(
    "Product",
    fields=[
        FieldSpec("id", [Length(min=3, max=200)]),
        FieldSpec("name", [Length(min=3, max=200)]),
        FieldSpec("variants", [Nested(PRODUCT_VARIANT_SCHEMA), Length(min=1)]),
    ],
)

DEFAULT_SCHEMAS: dict[type, RecordSchema] = {
    LoginRequest: LOGIN_SCHEMA,
    AddressRequest: ADDRESS_SCHEMA,
    RegisterUserRequest: REGISTER_USER_SCHEMA,
    CreateCategoryRequest: CREATE_CATEGORY_SCHEMA,
    ProductVariant: PRODUCT_VARIANT_SCHEMA,
    Product: PRODUCT_SCHEMA,
}
