# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Type, Union

from ..core.exceptions import NotFoundError
from ..core.primitives import ReportFormatEnum

if TYPE_CHECKING:
    from .creators import ReportCreator

REPORT_CREATOR_REGISTRY: Dict[ReportFormatEnum, Type["ReportCreator"]] = {}


def register_report_creator(report_format: ReportFormatEnum) -> Callable:
    """
    A decorator to register a report creator class for a report format.
    """

    def decorator(creator_cls: Type["ReportCreator"]) -> Type["ReportCreator"]:
        if report_format in REPORT_CREATOR_REGISTRY:
            raise ValueError(f"Report creator for format {report_format.value} is already registered.")
        REPORT_CREATOR_REGISTRY[report_format] = creator_cls
        return creator_cls

    return decorator


def get_report_creator(report_format: Union[ReportFormatEnum, str]) -> "ReportCreator":
    """
    Finds the creator registered for a report format and returns a new instance.

    Args:
        report_format: A ReportFormatEnum member or its name, case-insensitive

    Returns:
        A fresh creator for the requested format

    Raises:
        NotFoundError: If no creator is registered for the format

    Example:
        ```python
        get_report_creator("pdf").generate_report()  # Generating a PDF report.
        ```
    """
    resolved = (
        report_format
        if isinstance(report_format, ReportFormatEnum)
        else ReportFormatEnum.from_value(report_format)
    )
    creator_cls = REPORT_CREATOR_REGISTRY.get(resolved) if resolved is not None else None

    if creator_cls is None:
        raise NotFoundError(
            report_format,
            [fmt.value for fmt in REPORT_CREATOR_REGISTRY],
            kind="report creator",
        )

    return creator_cls()
