import os
from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
NOTES_TABLE = os.getenv("NOTES_TABLE", "notes")

# Editor
AUTOSAVE_DEBOUNCE_MS = int(os.getenv("AUTOSAVE_DEBOUNCE_MS", "2000"))
DEFAULT_FONT_SIZE = os.getenv("DEFAULT_FONT_SIZE", "16px")
EDITOR_SESSION_IDLE_SECONDS = int(os.getenv("EDITOR_SESSION_IDLE_SECONDS", "1800"))
