import gradio as gr

from keyword_csv_converter.handlers import (
    SAMPLE_DATA,
    convert_handler,
    download_handler,
    load_file_handler,
    load_sample_handler,
)
from keyword_csv_converter.logging_config import configure_logging
from keyword_csv_converter.settings import get_settings

INSTRUCTIONS = """### Instructions:
1. Paste your JSON array of keyword objects in the input field (or upload a `.json` file)
2. Each object should have 'keyword' (string) and 'search_volume' (number) properties
3. Optionally change the output file name
4. Click "Convert to CSV" to generate the CSV format
5. Click "Download CSV" to save the file to your computer
"""

SCHEMA_REFERENCE = """### Expected Schema:
```
type Keyword = {
  keyword: string;
  search_volume: number;
}

type Keywords = Keyword[];
```
"""

settings = get_settings()

# --- UI Definition ---
with gr.Blocks(title="Keywords to CSV Converter") as demo:
    gr.Markdown("# Keywords to CSV Converter")
    gr.Markdown("Convert an array of keyword objects to CSV format and download the file")

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            input_data = gr.Textbox(
                label="Input JSON Data",
                placeholder=SAMPLE_DATA,
                lines=12,
                max_lines=30,
            )
            with gr.Row():
                file_input = gr.File(label="Or upload a JSON file", file_types=[".json"])
                sample_btn = gr.Button("Use Sample Data", size="sm")
            file_name = gr.Textbox(
                label="File Name (without extension)",
                value=settings.default_file_name,
                placeholder="keywords",
            )
            convert_btn = gr.Button("Convert to CSV", variant="primary")
            error_box = gr.Textbox(label="Error", interactive=False, visible=False)

        # Right Panel: Output
        with gr.Column(scale=1):
            csv_output = gr.Textbox(
                label="CSV Output",
                placeholder="CSV output will appear here...",
                lines=12,
                max_lines=30,
                interactive=False,
            )
            download_btn = gr.Button("Download CSV", interactive=False)
            download_output = gr.File(label="Download Result")
            status_msg = gr.Textbox(label="Status", interactive=False)

    gr.Markdown(INSTRUCTIONS)
    gr.Markdown(SCHEMA_REFERENCE)

    file_input.upload(
        fn=load_file_handler,
        inputs=[file_input],
        outputs=[input_data, status_msg],
    )

    sample_btn.click(fn=load_sample_handler, inputs=[], outputs=[input_data])

    convert_btn.click(
        fn=convert_handler,
        inputs=[input_data],
        outputs=[csv_output, error_box, download_btn],
    )

    download_btn.click(
        fn=download_handler,
        inputs=[csv_output, file_name],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    configure_logging(settings.log_level)
    demo.launch(
        server_name=settings.host,
        server_port=settings.port,
        # Files outside the temp dir and cwd must be allow-listed to be served.
        allowed_paths=[str(settings.export_dir)] if settings.export_dir else None,
    )
