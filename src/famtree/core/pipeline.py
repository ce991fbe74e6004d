from __future__ import annotations

from famtree.config import get_config
from famtree.core.context import BuildContext
from famtree.core.exceptions import FamTreeError, TreeBuildError
from famtree.loader.source import extract_records, load_document
from famtree.logging import get_logger
from famtree.registry.entities import FamilyTree
from famtree.registry.tree_builder import build_family_tree


class Pipeline:
    """
    Orchestrates loading and tree construction.
    No business logic lives here.
    """

    def __init__(self, context: BuildContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> FamilyTree:
        cfg = self.ctx.config
        self.log.info("Pipeline starting: %s", self.ctx.source)

        try:
            document = load_document(
                self.ctx.source,
                client=self.ctx.client,
                timeout=float(cfg.source.get("timeout", 10.0)),
            )
            records = extract_records(document, cfg.wrapper_keys)
            tree = build_family_tree(records, root_anchor_id=cfg.root_anchor_id)

        except FamTreeError as exc:
            self.ctx.errors.append(str(exc))
            self.log.error("Pipeline failed: %s", exc)
            raise

        except Exception as exc:
            self.ctx.errors.append(str(exc))
            self.log.exception("Pipeline execution failed")
            raise TreeBuildError(str(exc)) from exc

        self.ctx.stats.update(tree.stats)
        self.log.info("Pipeline completed successfully")
        return tree


def build_tree_from_source(source: str, *, config=None, client=None) -> FamilyTree:
    """Convenience wrapper: one call from a location to a finished tree."""
    cfg = config or get_config()
    ctx = BuildContext(
        config=cfg,
        logger=get_logger("pipeline"),
        source=source,
        client=client,
    )
    return Pipeline(ctx).run()
