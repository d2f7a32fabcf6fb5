"""Purge a URL from Varnish."""

from django.core.management.base import BaseCommand

from purge.services.ban import WILDCARD
from purge.services.coordinator import build_coordinator
from purge.services.expansion import untrailingslashit


class Command(BaseCommand):
    help = "Send a BAN request for a URL (defaults to the whole site)"

    def add_arguments(self, parser):
        parser.add_argument(
            "url",
            nargs="?",
            default="",
            help="URL to purge, defaults to the site homepage",
        )
        parser.add_argument(
            "--wildcard",
            action="store_true",
            help="Include all subfolders and files",
        )

    def handle(self, *args, **options):
        coordinator = build_coordinator()
        url = options["url"]

        # No URL means the whole site
        wildcard = options["wildcard"] or not url

        if not url:
            url = coordinator.site.home_url()

        if options["wildcard"]:
            url = untrailingslashit(url)

        self.stdout.write(f"Purging URL {url} with regex {WILDCARD if wildcard else '(n/a)'}")

        if coordinator.purge_url(url, wildcard=wildcard) is None:
            self.stdout.write(self.style.WARNING(f"Not a purgeable URL: {url}"))
            return

        self.stdout.write(self.style.SUCCESS("Cache successfully purged."))
