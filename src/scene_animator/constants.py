"""Global constants for the application."""

# Canvas settings
CANVAS_WIDTH = 1200  # Drawing surface width in pixels
CANVAS_HEIGHT = 800  # Drawing surface height in pixels
CANVAS_MARGIN = 80  # Horizontal margin for left/right aligned text

# Playback settings
DEFAULT_REFRESH_RATE = 60  # Frame callbacks per second for the asyncio scheduler
SPEED_OPTIONS = (0.5, 1.0, 1.5, 2.0)  # Allowed play speed multipliers
DEFAULT_SPEED = 1.0
DEFAULT_STEP_MS = 100  # Step size for frame-by-frame scrubbing
SCENE_HOLD_MS = 500  # Time the fully revealed scene stays on screen

# Presentation timing (milliseconds)
PRESENTATION_TITLE_MS = 1000
PRESENTATION_SUBTITLE_OFFSET_MS = 1000
PRESENTATION_SUBTITLE_MS = 500
PRESENTATION_BULLET_BASE_DELAY_MS = 1000  # First bullet delay
PRESENTATION_BULLET_DELAY_STEP_MS = 500  # Delay between consecutive bullets
PRESENTATION_BULLET_MS = 500

# Mind-map timing (milliseconds)
MINDMAP_CENTER_MS = 1000
MINDMAP_NODE_BASE_OFFSET_MS = 1000
MINDMAP_NODE_MS = 300  # Also the stagger between nodes

# Timeline timing (milliseconds)
TIMELINE_TITLE_MS = 500
TIMELINE_AXIS_OFFSET_MS = 500
TIMELINE_AXIS_MS = 1000
TIMELINE_MARKER_BASE_OFFSET_MS = 1500
TIMELINE_MARKER_MS = 200  # Also the stagger between markers and labels

# Element defaults
DEFAULT_REVEAL_MS = 500  # Placeholder duration before timing assignment
DEFAULT_FONT_SIZE = 48
DEFAULT_COLOR = "#58C4DD"
DEFAULT_ALIGNMENT = "center"
CIRCLE_LABEL_THRESHOLD = 0.5  # Eased progress after which circle labels appear
CIRCLE_START_ANGLE = -90.0  # Arcs start at 12 o'clock

# Colors
BACKGROUND_COLOR = "#1a1a2e"
SUBTITLE_COLOR = "#E0E0E0"
PALETTE = ("#58C4DD", "#FF6B6B", "#51CF66", "#FFFF00", "#9775FA")
