from .commands import (
    CommandError,
    export_notes_html,
    export_notes_json,
    export_notes_markdown,
    get_data_dir,
    import_notes_json,
    load_notes,
    save_notes,
)
from .core.models import Folder, Note, Parcel

__all__ = ['Folder',
           'Note',
           'Parcel',
           'CommandError',
           'load_notes',
           'save_notes',
           'import_notes_json',
           'export_notes_json',
           'export_notes_markdown',
           'export_notes_html',
           'get_data_dir'
           ]
