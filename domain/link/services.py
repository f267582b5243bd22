"""Link Bounded Context - Domain Services.

Pure orchestration: resolve raw (count, key) specs against a catalog, build
both endpoints, and evaluate range and signal tables.
NO I/O operations - catalog documents are loaded by infrastructure adapters
and handed in already parsed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from domain.devices.catalog import DeviceCatalog
from domain.devices.errors import UnknownDeviceError
from domain.link.config import LinkConfig
from domain.link.endpoint import Endpoint
from domain.link.errors import EmptyEndpointError
from domain.link.value_objects import LinkReport

logger = logging.getLogger(__name__)

DeviceSpec = tuple[int, str]  # (count, device key)


class LinkRunner:
    """Builds two endpoints from raw specs and evaluates the link between them.

    The catalog is owned by the caller and passed in; nothing here is shared
    between runs.
    """

    def __init__(
        self, catalog: DeviceCatalog, config: LinkConfig | None = None
    ) -> None:
        self.catalog = catalog
        self.config = config or LinkConfig()

    def build_endpoint(
        self, specs: Sequence[DeviceSpec], default: DeviceSpec
    ) -> Endpoint:
        """Resolve every (count, key) pair and add it to a new Endpoint.

        All keys are resolved before anything is added, so every unknown key
        is reported at once. If ``specs`` is empty, exactly one ``default``
        pair is applied instead.

        Raises:
            UnknownDeviceError: Listing every key that did not resolve
            InvalidCountError: If a count is not a positive integer
        """
        if not specs:
            logger.debug("No devices given, using default %dx %r", *default)
            specs = (default,)

        unknown = [key for _, key in specs if key not in self.catalog]
        if unknown:
            raise UnknownDeviceError(*unknown)

        endpoint = Endpoint()
        for count, key in specs:
            endpoint.add(self.catalog.require(key), count)
        return endpoint

    def run(
        self, from_specs: Sequence[DeviceSpec], to_specs: Sequence[DeviceSpec]
    ) -> LinkReport:
        """Evaluate the link between the two described endpoints.

        Raises:
            UnknownDeviceError: If any key fails to resolve
            InvalidCountError: If any count is not a positive integer
            EmptyEndpointError: If an endpoint is empty after defaulting
            PowerOverflowError: If a combined power overflows
        """
        source = self.build_endpoint(from_specs, self.config.default_from)
        target = self.build_endpoint(to_specs, self.config.default_to)
        if source.is_empty():
            raise EmptyEndpointError("from")
        if target.is_empty():
            raise EmptyEndpointError("to")

        link_range = source.range_to(target)
        table = self.config.band_table
        logger.debug(
            "Link: from power %.6g, to power %.6g, max distance %.6g",
            link_range.power_from,
            link_range.power_to,
            link_range.max_distance,
        )
        return LinkReport(
            from_endpoint=source.summary(),
            to_endpoint=target.summary(),
            range=link_range,
            signal_table=table.evaluate(link_range.max_distance),
            landmarks=table.evaluate_sections(
                self.config.sections, link_range.max_distance
            ),
        )
