"""A short sequence of typical service log lines."""

from __future__ import annotations

from typing import Optional, Sequence

from logx import log


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Log a handful of example service messages."""
    log.info("service started")
    log.debug("using stage database")
    log.info("134.242.44.77\tPOST /api/user/36452\tuser login")
    log.info("167.32.121.2\tPOST /api/product/119879283\tadd product to cart")
    log.warn("167.32.121.2\tGET /api/product/119879283\tslow request")
    log.info("201.87.189.21\tGET /api/product/119879283\tget product info")
    log.error(
        "201.87.189.21\tGET /api/product/119879283\tdatabase connection lost",
        ConnectionResetError("connection reset by peer"),
    )


if __name__ == "__main__":
    main()