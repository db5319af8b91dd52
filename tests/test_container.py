"""Tests for container wiring."""

import asyncio

from nutriscan.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.scan_service.product_service is container.product_service
    assert container.scan_service.profile_service is container.profile_service
    assert container.scan_service.match_mode == "substring"
    asyncio.run(container.close_resources())


def test_build_container_honours_match_mode(settings) -> None:
    settings.match_mode = "word"

    container = build_container(settings)

    assert container.scan_service.match_mode == "word"
    asyncio.run(container.close_resources())
