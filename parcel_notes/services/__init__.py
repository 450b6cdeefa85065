from .exporter import export_html, export_json, export_markdown

__all__ = ["export_json", "export_markdown", "export_html"]
