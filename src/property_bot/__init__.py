"""WhatsApp auto-responder for FY'S PROPERTY."""

from dotenv import load_dotenv

# Local dev keeps credentials in .env; in production the variables come from the host.
load_dotenv()

__version__ = "0.1.0"
