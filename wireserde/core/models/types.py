from enum import StrEnum


class ValueType(StrEnum):
    """
    Declared value types with a built-in serde.

    The set is closed: there is no runtime registration of new members.
    """
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOLEAN = "boolean"
    STRING = "string"
    BYTES = "bytes"
    BYTE_BUFFER = "byte_buffer"
    UUID = "uuid"
    VOID = "void"
