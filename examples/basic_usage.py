"""Basic usage of rdmtext.

Build messages from command-line style tokens, inspect failures, and render
messages back to canonical text.
"""

from __future__ import annotations

from rdmtext import (
    BoolField,
    GroupField,
    Int8Field,
    MessageSchema,
    StringField,
    StringMessageBuilder,
    UInt8Field,
    render_message,
)


def main() -> None:
    schema = MessageSchema(
        "Example",
        [BoolField("bool"), UInt8Field("uint8"), StringField("string", 0, 32)],
    )

    # 1. Successful build
    builder = StringMessageBuilder(["TRUE", "255", "foo"])
    builder.traverse(schema)
    message = builder.get_message()
    assert message is not None
    print(render_message(message))

    # 2. Failed build: the error names the field and the reason
    builder = StringMessageBuilder(["2", "255", "foo"])
    if not builder.traverse(schema):
        error = builder.get_error()
        assert error is not None
        print(f"Error with field {error.field_name}: {error.reason} ({error.kind.value})")
    print(f"Message after failure: {builder.get_message()}")
    print()

    # 3. Repeating groups take as many repetitions as the tokens allow
    grouped = MessageSchema(
        "Grouped",
        [GroupField("group", [BoolField("bool"), Int8Field("int8")], 0, 5)],
    )
    builder = StringMessageBuilder(["true", "10", "false", "-42", "1", "127"])
    builder.traverse(grouped)
    message = builder.get_message()
    assert message is not None
    print(render_message(message))
    print(message.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
