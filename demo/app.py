"""
dynaform Demo - Schema-driven form rendering

This Gradio app renders a form from the schema and UI order documents:
1. One input per field, in UI order
2. Number inputs keep digits only as you type
3. "Submit" validates and shows the result JSON or the field errors
4. "Reset" reloads the documents and clears the form

Set DYNAFORM_SCHEMA_PATH / DYNAFORM_UI_SCHEMA_PATH to render your own form.
"""

import gradio as gr

from dynaform import FieldKind, FormState, SchemaError, TypeMismatch, digits_only

form = FormState()


def _label(key: str) -> str:
    return key.replace("_", " ").title()


def _default(field):
    kind = FieldKind(field.kind)
    if kind is FieldKind.BOOLEAN:
        return False
    if kind is FieldKind.DROPDOWN:
        return None
    return ""


def _to_form_value(field, raw):
    """Convert a widget value to what the form expects for this field."""
    kind = FieldKind(field.kind)
    if kind is FieldKind.BOOLEAN:
        return bool(raw)
    if kind is FieldKind.NUMBER:
        return digits_only(raw or "")
    return raw or ""


def _errors_markdown() -> str:
    lines = ["## ❌ Please fix the following:", ""]
    for error in form.last_validation.errors:
        lines.append(f"- **{_label(error.field_name)}**: {error.message}")
    return "\n".join(lines)


def submit(*values):
    """Push every widget value into the form, then validate."""
    try:
        form.set_values({
            field.key: _to_form_value(field, raw)
            for field, raw in zip(form.fields(), values)
        })
    except TypeMismatch as e:
        return f"❌ {e}", {}

    if form.validate():
        return "## ✅ Form submitted successfully!", form.serialize()
    return _errors_markdown(), {}


def reset():
    """Reload the form and clear every widget."""
    try:
        form.reset()
    except SchemaError as e:
        return [gr.update() for _ in inputs] + [f"❌ {e}", {}]
    return [_default(field) for field in form.fields()] + ["", {}]


# Create Gradio Interface
with gr.Blocks(title="dynaform Demo") as demo:
    gr.Markdown("""
# 📝 Dynamic Form

> *Fields, types and order come from `form_schema.json` and `ui_schema.json`.*
    """)

    inputs = []
    with gr.Row():
        with gr.Column(scale=1):
            for field in form.fields():
                kind = FieldKind(field.kind)
                label = _label(field.key)
                if field.key in form.required:
                    label += " *"

                if kind is FieldKind.TEXT:
                    component = gr.Textbox(label=label)
                elif kind is FieldKind.NUMBER:
                    component = gr.Textbox(label=label, placeholder="Digits only")
                    component.input(fn=digits_only, inputs=component, outputs=component)
                elif kind is FieldKind.BOOLEAN:
                    component = gr.Checkbox(label=label, value=False)
                else:
                    component = gr.Dropdown(label=label, choices=list(field.options), value=None)
                inputs.append(component)

            with gr.Row():
                submit_btn = gr.Button("Submit", variant="primary", size="lg")
                reset_btn = gr.Button("Reset", variant="secondary", size="lg")

        with gr.Column(scale=1):
            status_md = gr.Markdown(label="Status")
            result_json = gr.JSON(label="Result")

    submit_btn.click(
        fn=submit,
        inputs=inputs,
        outputs=[status_md, result_json],
    )

    reset_btn.click(
        fn=reset,
        inputs=None,
        outputs=inputs + [status_md, result_json],
    )


if __name__ == "__main__":
    demo.launch(server_name="0.0.0.0", server_port=7860)
