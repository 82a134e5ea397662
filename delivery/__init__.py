from delivery.output import (
    deliver_cli,
    deliver_popularity,
    export_filename,
    export_idea,
    export_json,
    filter_ideas,
    save_idea,
    share_text,
)

__all__ = [
    "deliver_cli",
    "deliver_popularity",
    "export_filename",
    "export_idea",
    "export_json",
    "filter_ideas",
    "save_idea",
    "share_text",
]
