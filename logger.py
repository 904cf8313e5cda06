# logger.py

# This will hold a reference to the active RenderTimer instance.
_render_timer = None

def set_render_timer(timer):
    """Sets the render timer the logger uses for timestamps."""
    global _render_timer
    _render_timer = timer

def format_prefix():
    if _render_timer and _render_timer.started_at is not None:
        return f"[Render {_render_timer.get_display_string()}]"
    # For messages logged before any render has started.
    return "[Startup]"

def log(message):
    """Prints a message with a render timestamp if available."""
    print(f"{format_prefix()} {message}")
