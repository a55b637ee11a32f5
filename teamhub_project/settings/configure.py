import os
from dotenv import load_dotenv

load_dotenv()

# Set the Django settings module to use the consolidated settings
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "teamhub_project.settings.settings")


def configure_settings_module():
    """
    Configure Django settings module to use the consolidated settings file.
    All environment-specific configuration is handled through environment variables.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "teamhub_project.settings.settings")
