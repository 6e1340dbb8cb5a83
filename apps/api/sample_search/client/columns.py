from dataclasses import dataclass


@dataclass(frozen=True)
class Column:
    accessor: str
    header: str


BASE_COLUMNS = (
    Column("name", "Patient Name"),
    Column("sample_id", "Sample Barcode"),
    Column("activate_time", "Activation Date"),
    Column("result_time", "Result Date"),
    Column("result", "Result Value"),
)

EXTENDED_COLUMNS = (
    Column("result_type", "Result Type"),
    Column("id", "Patient ID"),
)


def select_columns(extended_fields: bool) -> list[Column]:
    columns = list(BASE_COLUMNS)
    if extended_fields:
        columns.extend(EXTENDED_COLUMNS)
    return columns
