"""
Standards Resolution Engine

Merges the authority layers for a (jurisdiction, subject, grade) key:

1. National baseline      (catalog, DEFAULT jurisdiction)
2. State baseline         (catalog, caller's jurisdiction; replace by ID or append)
3. State overrides        (store; replace ID + description of an existing entry)
4. District standards     (store; always appended)
5. School overrides       (store; replace description only)

Layers 3-5 are read concurrently, each under its own timeout, then
applied strictly in order 3, 4, 5. A failed or timed-out read turns that
layer into an empty one; resolution itself never fails. Cancellation is
propagated, never converted into a partial result.

Nothing is cached: every call re-reads the store, so admin writes are
visible on the next call.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from config.standards_settings import STORE_READ_TIMEOUT_SECONDS
from src.schemas.base import DEFAULT_JURISDICTION, StandardLayer
from src.schemas.standards import DistrictStandard, ResolvedStandard, SchoolOverride, StateOverride
from src.standards.catalog import CatalogProvider
from src.standards.errors import StoreUnavailableError
from src.store.base import OverrideStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

DISTRICT_FRAMEWORK = "District"
DISTRICT_SOURCE = "District Custom"
SCHOOL_SOURCE = "School Override"


def _index_of(standards: list[ResolvedStandard], standard_id: str) -> int | None:
    return next((i for i, s in enumerate(standards) if s.standard_id == standard_id), None)


class StandardsResolutionEngine:
    """
    Stateless resolver. Holds only its two collaborators and a read timeout,
    so one instance can serve any number of concurrent calls.
    """

    def __init__(
        self,
        store: OverrideStore,
        catalog: CatalogProvider | None = None,
        read_timeout: float | None = None,
    ) -> None:
        self._store = store
        self._catalog = catalog or CatalogProvider()
        self._read_timeout = STORE_READ_TIMEOUT_SECONDS if read_timeout is None else read_timeout

    async def resolve_standards(
        self,
        jurisdiction: str,
        subject: str,
        grade: int,
        district_id: str | None = None,
        school_id: str | None = None,
    ) -> list[ResolvedStandard]:
        """
        Resolve the ordered, de-duplicated standard set for a scope.

        Args:
            jurisdiction: Jurisdiction code; DEFAULT_JURISDICTION means national only
            subject: Subject name, matched case-sensitively against the catalog
            grade: Grade number (0 = Pre-K); not range-checked
            district_id: Optional district whose custom standards are appended
            school_id: Optional school whose overrides are applied last

        Returns:
            Entries in first-insertion order; replacements keep their position
        """
        standards = self._catalog.base_standards(subject, grade, DEFAULT_JURISDICTION)
        self._merge_state_baseline(standards, self._catalog.base_standards(subject, grade, jurisdiction))

        state_overrides, district_standards, school_overrides = await asyncio.gather(
            self._fetch_layer(
                StandardLayer.STATE,
                jurisdiction != DEFAULT_JURISDICTION,
                lambda: self._store.query_state_overrides(jurisdiction, subject),
            ),
            self._fetch_layer(
                StandardLayer.DISTRICT,
                district_id is not None,
                lambda: self._store.query_district_standards(district_id, subject, grade),
            ),
            self._fetch_layer(
                StandardLayer.SCHOOL,
                school_id is not None,
                lambda: self._store.query_school_overrides(school_id),
            ),
        )

        self._apply_state_overrides(standards, state_overrides, jurisdiction)
        self._append_district_standards(standards, district_standards)
        self._apply_school_overrides(standards, school_overrides)

        logger.debug(
            f"Resolved {len(standards)} standards for {jurisdiction}/{subject}/{grade} "
            f"(district={district_id}, school={school_id})"
        )
        return standards

    async def standards_for_lesson(
        self,
        subject: str,
        grade: int,
        jurisdiction: str,
        district_id: str | None = None,
        school_id: str | None = None,
    ) -> list[str]:
        """Resolved standards as "<standard_id> — <description>" lines."""
        resolved = await self.resolve_standards(jurisdiction, subject, grade, district_id, school_id)
        return [standard.lesson_line() for standard in resolved]

    # -------------------------------------------------------------------------
    # Layer reads
    # -------------------------------------------------------------------------

    async def _fetch_layer(
        self,
        layer: StandardLayer,
        enabled: bool,
        read: Callable[[], Awaitable[list[T]]],
    ) -> list[T]:
        if not enabled:
            return []
        try:
            return await asyncio.wait_for(read(), timeout=self._read_timeout)
        except asyncio.TimeoutError:
            error = StoreUnavailableError(layer.value, f"read timed out after {self._read_timeout}s")
        except StoreUnavailableError as e:
            error = e
        except Exception as e:
            error = StoreUnavailableError(layer.value, e)
        logger.warning(f"{error}; continuing without the {layer.value} layer")
        return []

    # -------------------------------------------------------------------------
    # Merge steps
    # -------------------------------------------------------------------------

    @staticmethod
    def _merge_state_baseline(
        standards: list[ResolvedStandard], state_standards: list[ResolvedStandard]
    ) -> None:
        for entry in state_standards:
            idx = _index_of(standards, entry.standard_id)
            if idx is None:
                standards.append(entry)
            else:
                standards[idx] = entry

    @staticmethod
    def _apply_state_overrides(
        standards: list[ResolvedStandard], overrides: list[StateOverride], jurisdiction: str
    ) -> None:
        for override in overrides:
            idx = _index_of(standards, override.replaces_standard_id)
            if idx is None:
                logger.debug(f"State override {override.id} targets missing {override.replaces_standard_id}; skipped")
                continue
            clash = _index_of(standards, override.new_standard_id)
            if clash is not None and clash != idx:
                logger.debug(f"State override {override.id} would duplicate {override.new_standard_id}; skipped")
                continue
            standards[idx] = standards[idx].model_copy(
                update={
                    "standard_id": override.new_standard_id,
                    "description": override.description,
                    "framework": jurisdiction,
                    "source": f"State Override ({jurisdiction})",
                    "resolved_from": StandardLayer.STATE,
                    "is_overridden": True,
                }
            )

    @staticmethod
    def _append_district_standards(
        standards: list[ResolvedStandard], district_standards: list[DistrictStandard]
    ) -> None:
        for custom in district_standards:
            standards.append(
                ResolvedStandard(
                    standard_id=custom.id,
                    framework=DISTRICT_FRAMEWORK,
                    subject=custom.subject,
                    grade=custom.grade,
                    description=custom.description,
                    source=DISTRICT_SOURCE,
                    resolved_from=StandardLayer.DISTRICT,
                    is_overridden=False,
                )
            )

    @staticmethod
    def _apply_school_overrides(
        standards: list[ResolvedStandard], overrides: list[SchoolOverride]
    ) -> None:
        # Store filters by school only; a matching standard_id is the sole join key
        for override in overrides:
            idx = _index_of(standards, override.overrides_standard_id)
            if idx is None:
                logger.debug(f"School override {override.id} targets missing {override.overrides_standard_id}; skipped")
                continue
            standards[idx] = standards[idx].model_copy(
                update={
                    "description": override.custom_description,
                    "source": SCHOOL_SOURCE,
                    "resolved_from": StandardLayer.SCHOOL,
                    "is_overridden": True,
                }
            )


def filter_standards(
    standards: list[ResolvedStandard],
    search: str | None = None,
    resolved_from: StandardLayer | None = None,
) -> list[ResolvedStandard]:
    """
    Narrow a resolved list for browsing.

    `search` matches case-insensitively against standard_id and description;
    `resolved_from` keeps only entries produced by that layer.
    """
    needle = (search or "").strip().lower()
    return [
        s for s in standards
        if (not needle or needle in s.standard_id.lower() or needle in s.description.lower())
        and (resolved_from is None or s.resolved_from == resolved_from)
    ]
