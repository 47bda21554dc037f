"""
Mock Location API — Location Service (Corpus Generator & Paginator)
=====================================================================

What:  Builds a fixed-size corpus of fake location records and returns one page of it.
Why:   Downstream clients practise pagination, JSON deserialization and image
       rendering against this data; it only has to look plausible.
How:   Faker supplies city names and timestamps; image URLs follow the
       picsum.photos numbered-placeholder format.
Who:   Called by the GET /locations route handler.
When:  Once per request. Nothing is cached between requests.

Generation Flow:
    ┌───────────────┐    ┌──────────────────┐    ┌───────────────┐
    │ Fresh Faker   │───▶│ total_items fake │───▶│ Slice at      │
    │ (seeded opt.) │    │ records          │    │ (page-1)*size │
    └───────────────┘    └──────────────────┘    └───────────────┘

Pagination rules:
    offset = (page - 1) * page_size
    data   = corpus[offset : offset + page_size]

    page and page_size below 1 are clamped to 1 before the offset is
    computed. There is no upper bound on page_size; slicing past the end
    of the corpus just returns fewer (or zero) records.
"""

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from typing import List, Optional, Sequence, TypeVar
from zoneinfo import ZoneInfo

from faker import Faker

from mock_locations.config import Settings, settings as default_settings
from mock_locations.exceptions import RecordGenerationError
from mock_locations.schemas.location import LocationPage, LocationRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")

PICSUM_BASE_URL = "https://picsum.photos"

# Highest image id served by picsum's numbered-image endpoint
PICSUM_MAX_IMAGE_ID = 1084


def picsum_url(
    fake: Faker,
    width: int = 640,
    height: int = 480,
    grayscale: bool = False,
    blur: bool = False,
    image_id: Optional[int] = None,
) -> str:
    """
    Build a picsum.photos placeholder URL.

    Format: https://picsum.photos[/g]/{width}/{height}/?image={id}[&blur]

    A random image id in [0, PICSUM_MAX_IMAGE_ID] is drawn from `fake`
    when `image_id` is not given, so seeded Faker instances produce
    repeatable URLs.
    """
    if image_id is None:
        image_id = fake.random_int(min=0, max=PICSUM_MAX_IMAGE_ID)
    url = PICSUM_BASE_URL
    if grayscale:
        url += "/g"
    url += f"/{width}/{height}/?image={image_id}"
    if blur:
        url += "&blur"
    return url


def clamp_pagination(page: int, page_size: int) -> tuple[int, int]:
    """Clamp page and page_size to at least 1."""
    return max(page, 1), max(page_size, 1)


def paginate(items: Sequence[T], page: int, page_size: int) -> List[T]:
    """
    Return the page of `items` for 1-based `page` of size `page_size`.

    Expects already-clamped arguments. An offset at or past the end
    yields an empty list.
    """
    offset = (page - 1) * page_size
    return list(items[offset:offset + page_size])


class LocationService:
    """
    Generates location corpora and pages through them.

    Stateless apart from its (read-only) settings: each call to
    `generate_corpus` constructs its own Faker instance, so concurrent
    requests on the threadpool never share a random generator.
    """

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings

    def _new_faker(self) -> Faker:
        fake = Faker(self.config.faker_locale)
        if self.config.faker_seed is not None:
            fake.seed_instance(self.config.faker_seed)
        return fake

    def _timestamp_zone(self) -> Optional[tzinfo]:
        # None → datetime.astimezone() picks the server's local offset
        if self.config.timestamp_timezone:
            return ZoneInfo(self.config.timestamp_timezone)
        return None

    def build_record(self, fake: Faker, now: datetime) -> LocationRecord:
        """
        Build one record. Fields are drawn in a fixed order (name, image,
        timestamp) so a seeded Faker always yields the same sequence.
        """
        observed = fake.date_time_between(
            start_date=now - timedelta(days=self.config.recent_days),
            end_date=now,
            tzinfo=timezone.utc,
        )
        return LocationRecord(
            location_name=fake.city(),
            image_url=picsum_url(
                fake,
                width=self.config.image_width,
                height=self.config.image_height,
            ),
            timestamp=observed.astimezone(self._timestamp_zone()),
        )

    def generate_corpus(self) -> List[LocationRecord]:
        """
        Generate the full corpus of `total_items` records.

        Raises:
            RecordGenerationError: Faker failed while generating
        """
        total = self.config.total_items
        now = datetime.now(timezone.utc)
        try:
            fake = self._new_faker()
            corpus = [self.build_record(fake, now) for _ in range(total)]
        except Exception as exc:
            logger.error("Corpus generation failed: %s", exc, exc_info=True)
            raise RecordGenerationError(
                context={
                    "original_error": type(exc).__name__,
                    "locale": self.config.faker_locale,
                },
            ) from exc

        logger.debug(
            "Generated corpus of %d records (seeded=%s)",
            total,
            self.config.faker_seed is not None,
        )
        return corpus

    def list_locations(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> LocationPage:
        """
        Regenerate the corpus and return the requested page.

        Args:
            page: 1-based page index (default from settings, normally 1)
            page_size: records per page (default from settings, normally 10)

        Returns:
            LocationPage echoing the clamped page/page_size, the corpus
            size, and at most `page_size` records.
        """
        if page is None:
            page = self.config.default_page
        if page_size is None:
            page_size = self.config.default_page_size
        page, page_size = clamp_pagination(page, page_size)

        corpus = self.generate_corpus()
        data = paginate(corpus, page, page_size)

        logger.debug(
            "Serving page %d (size %d): %d of %d records",
            page,
            page_size,
            len(data),
            len(corpus),
        )
        return LocationPage(
            page=page,
            page_size=page_size,
            total_items=len(corpus),
            data=data,
        )
