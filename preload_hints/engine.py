# File: preload_hints/engine.py
"""preload_hints.engine: orchestration of discovery, selection and tag injection for one page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from preload_hints.assets.extractor import extract_assets, extract_hosts
from preload_hints.assets.filters import DISALLOWED_FINAL, DISALLOWED_INITIAL, remove_disallowed
from preload_hints.assets.models import AssetDescriptor, HostDescriptor, SourceKind
from preload_hints.assets.urls import resolve_site_host
from preload_hints.config import OptimizeConfig
from preload_hints.injector import inject_preconnect, inject_preload
from preload_hints.logger import logger
from preload_hints.parser.dom import parse_document
from preload_hints.parser.selector import (
    select_images,
    select_marked,
    select_priority_region,
    select_styled,
    select_tags,
)
from preload_hints.policy import Policy
from preload_hints.utils import hosts_from_assets, merge_hosts, merge_unique

__all__ = ["Engine", "HintPlan", "process_assets"]


@dataclass(slots=True)
class HintPlan:
    """Итог обработки страницы: политика, preload-ассеты и хосты для preconnect."""

    template: str
    site_host: str
    policy: Policy
    preload: List[AssetDescriptor] = field(default_factory=list)
    hosts: List[HostDescriptor] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "template": self.template,
            "site_host": self.site_host,
            "policy": self.policy.to_dict(),
            "preload": [a.to_dict() for a in self.preload],
            "hosts": [h.to_dict() for h in self.hosts],
        }


class Engine:
    """Фасад для CLI и тестов: построение плана подсказок и их вставка в HTML."""

    def __init__(self, config: OptimizeConfig) -> None:
        self.config = config

    def plan(self, html: str, template: str, request_host: Optional[str] = None) -> HintPlan:
        """Decide which assets to preload and which hosts to preconnect for *html*."""
        site_host = resolve_site_host(self.config.board_url, request_host)
        policy = Policy.from_config(self.config, template)
        plan = HintPlan(template=template, site_host=site_host, policy=policy)
        logger.debug("Template %s, site host %s, policy %s", template, site_host, policy)

        if not (policy.preconnect_enabled or policy.is_preload or policy.is_auto_preload):
            return plan

        document = parse_document(html)

        from_tags: List[AssetDescriptor] = []
        from_styles: List[AssetDescriptor] = []
        from_data_attr: List[AssetDescriptor] = []
        from_priority: List[AssetDescriptor] = []

        if policy.scans_images:
            from_tags = extract_assets(select_images(document), SourceKind.IMG, site_host, DISALLOWED_INITIAL)
            from_styles = extract_assets(
                select_styled(document), SourceKind.BG_STYLE, site_host, DISALLOWED_INITIAL
            )

        if policy.is_manual_preload:
            from_data_attr = extract_assets(
                select_marked(document), SourceKind.DATA_PRELOAD, site_host, DISALLOWED_INITIAL
            )

        if policy.is_priority_preload:
            region = select_priority_region(document, self.config.priority_container_class)
            from_priority = extract_assets(region, SourceKind.PRIORITY, site_host, DISALLOWED_INITIAL)

        if policy.preconnect_enabled:
            scripts = extract_hosts(select_tags(document, "script"), SourceKind.SCRIPT, site_host)
            links = extract_hosts(select_tags(document, "link"), SourceKind.LINK, site_host)
            iframes = extract_assets(select_tags(document, "iframe"), SourceKind.IFRAME, site_host)
            images = merge_unique(from_tags, from_styles, from_data_attr)
            plan.hosts = merge_hosts(
                hosts_from_assets(images, site_host),
                scripts,
                links,
                hosts_from_assets(iframes, site_host),
            )

        if policy.is_priority_preload:
            preload = merge_unique(from_data_attr, from_priority)
        elif policy.is_manual_preload:
            preload = from_data_attr
        else:
            preload = []

        if policy.is_preload:
            preload = remove_disallowed(preload, DISALLOWED_FINAL)
            limit = self.config.per_page_limit
            if limit:
                preload = preload[:limit]
            plan.preload = preload

        return plan

    def process(self, html: str, template: str, request_host: Optional[str] = None) -> str:
        """Return *html* with preload and preconnect tags inserted."""
        plan = self.plan(html, template, request_host)
        if plan.preload:
            html = inject_preload(html, plan.preload)
        if plan.hosts:
            html = inject_preconnect(html, plan.hosts)
        logger.info(
            "Template %s: %d preload, %d preconnect hints",
            template,
            len(plan.preload),
            len(plan.hosts),
        )
        return html


def process_assets(
    html: str,
    template: str,
    config: OptimizeConfig,
    request_host: Optional[str] = None,
) -> str:
    """Single-call entry point: plan hints for *html* and inject them."""
    return Engine(config).process(html, template, request_host)
