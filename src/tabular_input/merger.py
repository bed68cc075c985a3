"""
Script Registry Merger
Reconciles scripts emitted while a widget renders its rows.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from .core.id import new_script_key
from .core.logging_config import get_logger
from .registry import ScriptEntry, ScriptPosition, ScriptRegistry

logger = get_logger(__name__)


@dataclass
class CapturedScripts:
    """
    Scripts registered during one render pass.

    prelude: new entries outside the deferred bucket; they stay in the
        registry and run once, before the widget bootstrap.
    deferred: new entries of the deferred bucket; removed from the
        registry on commit and replayed by the client for every cloned row.
    """
    prelude: list[ScriptEntry] = field(default_factory=list)
    deferred: list[ScriptEntry] = field(default_factory=list)

    @property
    def prelude_scripts(self) -> list[str]:
        return [e.script for e in self.prelude]

    @property
    def deferred_scripts(self) -> list[str]:
        return [e.script for e in self.deferred]


class ScriptRegistryMerger:
    """
    Snapshot/diff protocol over a shared ScriptRegistry.

    capture() only reads the registry; commit() is the single mutation
    (remove deferred entries, append bootstrap lines), so a failure between
    the two leaves the registry exactly as rendering left it.

    Examples:
        >>> merger = ScriptRegistryMerger(registry)
        >>> with merger.capture() as captured:
        ...     content = render_rows()
        >>> merger.commit(captured, [bootstrap_js])
    """

    def __init__(
        self,
        registry: ScriptRegistry,
        deferred_position: ScriptPosition = ScriptPosition.READY,
    ):
        self.registry = registry
        self.deferred_position = ScriptPosition(deferred_position)

    @contextmanager
    def capture(self) -> Iterator[CapturedScripts]:
        """
        Classify scripts registered inside the block.

        The yielded CapturedScripts is filled when the block exits normally;
        if the block raises, the exception propagates and nothing is filled.
        """
        before = self.registry.snapshot()
        captured = CapturedScripts()

        yield captured

        for entry in self.registry.diff(before):
            if entry.position == self.deferred_position:
                captured.deferred.append(entry)
            else:
                captured.prelude.append(entry)

        logger.debug(
            "scripts_captured",
            existing=len(before),
            prelude=len(captured.prelude),
            deferred=len(captured.deferred),
        )

    def commit(self, captured: CapturedScripts, bootstrap: list[str]) -> list[str]:
        """
        Hand deferred scripts over to the payload and register the bootstrap.

        Args:
            captured: Result of capture()
            bootstrap: Bootstrap statements, in execution order

        Returns:
            Registry keys of the appended bootstrap statements
        """
        for entry in captured.deferred:
            self.registry.remove(entry.position, entry.key)

        # Fresh keys: every render call appends its own bootstrap, even when
        # an identical statement is already registered
        keys = [
            self.registry.register(line, self.deferred_position, key=new_script_key())
            for line in bootstrap
        ]
        logger.debug("bootstrap_registered", keys=keys)
        return keys
