"""
Examples for docx-sdt
=====================
Three complete examples showing content controls in real-world forms.

Run:
    python examples/examples.py
"""

from __future__ import annotations

import sys
import tempfile
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from docx_sdt import (
    BlockContentControl,
    CheckboxContentControl,
    ContentControlBuilder,
    DatePickerContentControl,
    Diagnostics,
    Formatter,
    GuidValidator,
    IdGenerator,
    InlineRichTextContentControl,
    NestingViolationError,
    Paragraph,
    RunContentControl,
    Table,
    TableCell,
    TableRow,
    TextRun,
    load_definition,
    render_body,
    to_xml,
)


# ---------------------------------------------------------------------------
# Example 1: Customer letter
# ---------------------------------------------------------------------------


def example_customer_letter() -> None:
    """
    Example 1: A letter template with fill-in fields.

    Plain text controls mark the variable parts of the letter; a block
    control wraps the terms section so it can be locked as a whole.
    """
    print("\n" + "="*60)
    print("EXAMPLE 1: Customer Letter")
    print("="*60)

    ids = IdGenerator()
    name = RunContentControl(
        tag="CustomerName",
        title="Customer Name",
        children=[TextRun("[Customer Name]")],
        id_generator=ids,
    )
    total = RunContentControl(
        tag="OrderTotal",
        title="Order Total",
        children=[TextRun("$0.00", bold=True, color="009900")],
        max_length=12,
        id_generator=ids,
    )
    terms = BlockContentControl(
        tag="Terms",
        title="Terms and Conditions",
        lock={"sdt_locked": True, "content_lock": True},
        children=[
            Paragraph("Payment is due within 30 days."),
            Paragraph("Late payments incur a 2% monthly fee."),
        ],
        id_generator=ids,
    )

    body = [
        Paragraph([TextRun("Dear "), name, TextRun(", thank you for your business.")]),
        Paragraph([TextRun("Your order totaling "), total, TextRun(" has been processed.")]),
        terms,
    ]
    xml = render_body(body)
    print(f"\n  Controls: {name!r}, {total!r}, {terms!r}")
    print(f"  Body XML: {len(xml)} characters")

    try:
        RunContentControl(
            tag="Outer",
            children=[RunContentControl(tag="Inner", children=[TextRun("x")])],
        )
    except NestingViolationError as e:
        print(f"  Plain text nesting rejected: {str(e).splitlines()[0]}")
    print("  ✓ Example 1 complete")


# ---------------------------------------------------------------------------
# Example 2: Task form with interactive controls
# ---------------------------------------------------------------------------


def example_task_form() -> None:
    """
    Example 2: A task form with dropdown, date picker and checkbox.

    The priority dropdown is bound to a custom XML part, so a workflow
    system can read the selection without parsing the document text.
    """
    print("\n" + "="*60)
    print("EXAMPLE 2: Task Form")
    print("="*60)

    diagnostics = Diagnostics(forward_to_log=False)
    store_item_id = GuidValidator.generate_test_guid()

    priority = (
        ContentControlBuilder.dropdown("TaskPriority")
        .with_title("Priority")
        .add_item("High Priority", "high")
        .add_item("Medium Priority", "medium")
        .add_item("Low Priority", "low")
        .bind_to("/task/priority", store_item_id)
        .with_diagnostics(diagnostics)
        .build([TextRun("Medium Priority")])
    )
    due = DatePickerContentControl(
        tag="DueDate",
        title="Due Date",
        date_format="yyyy-MM-dd",
        default_date=datetime(2024, 12, 31, tzinfo=timezone.utc),
        children=[TextRun("2024-12-31")],
        diagnostics=diagnostics,
    )
    done = CheckboxContentControl(
        tag="Completed",
        checked_symbol={"font": "Wingdings", "character": "☑"},
        unchecked_symbol={"font": "Wingdings", "character": "☐"},
        diagnostics=diagnostics,
    )

    table = Table([
        TableRow([TableCell("Priority"), TableCell([Paragraph([priority])])]),
        TableRow([TableCell("Due"), TableCell([Paragraph([due])])]),
        TableRow([TableCell("Done"), TableCell([Paragraph([done])])]),
    ])

    print(f"\n  Store item: {store_item_id}")
    print(f"  Priority XML: {to_xml(Formatter().format(priority))[:120]}...")
    print(f"  Table rows: {len(table.rows)}")
    print(f"  Diagnostics: {len(diagnostics)}")
    print("  ✓ Example 2 complete")


# ---------------------------------------------------------------------------
# Example 3: Definition file
# ---------------------------------------------------------------------------


def example_definition_file() -> None:
    """
    Example 3: Forms described as JSON.

    The same definition format drives the ``docx-sdt`` command line tool.
    Suspicious settings are reported as diagnostics rather than errors.
    """
    print("\n" + "="*60)
    print("EXAMPLE 3: Definition File")
    print("="*60)

    definition = {
        "body": [
            {"type": "paragraph", "children": [
                {"type": "text", "text": "Address: "},
                {"type": "richText", "tag": "Address", "children": [
                    {"type": "text", "text": "Street: "},
                    {"type": "run", "tag": "Street", "children": [
                        {"type": "text", "text": "[Street]"},
                    ]},
                ]},
            ]},
            {"type": "paragraph", "children": [
                {"type": "text", "text": "Signed: "},
                {"type": "datePicker", "tag": "Signed On", "locale": "english",
                 "defaultDate": "2025-01-15T12:00:00Z",
                 "children": [{"type": "text", "text": "01/15/2025"}]},
            ]},
        ],
    }

    diagnostics = Diagnostics(forward_to_log=False)
    nodes = load_definition(definition, diagnostics=diagnostics)
    xml = render_body(nodes)

    with tempfile.TemporaryDirectory() as tmpdir:
        out = Path(tmpdir) / "document.xml"
        out.write_text(xml, encoding="utf-8")
        print(f"\n  Wrote {out.stat().st_size} bytes")

    for issue in diagnostics:
        print(f"  [{issue.rule_id}] {issue}")

    address = nodes[0].children[1]
    assert isinstance(address, InlineRichTextContentControl)
    print(f"  Nested controls under Address: {len(address.children)}")
    print("  ✓ Example 3 complete")


# ---------------------------------------------------------------------------
# Run all examples
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    example_customer_letter()
    example_task_form()
    example_definition_file()

    print("\n" + "="*60)
    print("All examples completed successfully.")
    print("="*60 + "\n")
