"""Data layer: models, formats and per-format handlers.

docrender/data/
├── __init__.py
├── models.py               # Template, ArtifactDocument, RenderedDocument, ...
├── errors.py               # failure types
├── formats.py              # DocumentFormat, classification, file naming
├── document_io.py          # bytes <-> docx/xlsx objects
├── markdown_parser.py      # artifact body line parsing and flattening
├── placeholder_detector/   # placeholder detection per container
├── template_filler/        # placeholder filling per container
├── renderers/              # artifact rendering per output format
└── registry.py             # format -> (detector, filler, renderer)
"""
