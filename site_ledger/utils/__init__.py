from .pdf import render_to_pdf

__all__ = ["render_to_pdf"]
