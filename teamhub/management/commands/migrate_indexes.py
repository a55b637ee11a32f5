from django.core.management.base import BaseCommand
from teamhub_project.db.init import initialize_database


class Command(BaseCommand):
    help = "Create the MongoDB indexes for teams and users"

    def add_arguments(self, parser):
        parser.add_argument("--max-retries", type=int, default=5, help="Connection attempts before giving up")
        parser.add_argument("--retry-delay", type=int, default=2, help="Seconds between connection attempts")

    def handle(self, *args, **options):
        self.stdout.write("Starting database index migrations...")

        success = initialize_database(max_retries=options["max_retries"], retry_delay=options["retry_delay"])

        if success:
            self.stdout.write(self.style.SUCCESS("All database index migrations completed successfully!"))
        else:
            self.stdout.write(self.style.ERROR("Some database index migrations failed!"))
