# -*- coding: utf-8 -*-
"""
I18nForge Conversion Planner

Turns (text, range) candidates into a batch of non-overlapping edits that
replace each text with a translation call.

Two modes:
- preview: annotated overlays only, nothing is mutated
- commit:  plan, run the context fixups, apply everything in one pass over
           the original document
"""

from dataclasses import dataclass, field
from typing import List, Sequence

import i18nforge_config as config
from core.context_fixup import apply_fixups
from core.key_generator import KeyGenerator
from core.text_utils import is_quoted_text
from i18nforge_enums import SyntaxFamily, ResultStatus
from i18nforge_logger import get_logger
from models.session import SessionContext
from models.text_range import TextRange, Modification, PreviewOverlay

logger = get_logger("core.conversion_planner")


@dataclass
class ConversionResult:
    """Outcome of a commit."""
    status: ResultStatus
    document_text: str
    modifications: List[Modification] = field(default_factory=list)

    @property
    def applied_count(self) -> int:
        return len(self.modifications)


def apply_modifications(content: str, modifications: Sequence[Modification]) -> str:
    """
    Apply a non-overlapping batch to content in one pass.

    Edits are applied by descending start offset so lower offsets stay
    valid while higher regions are rewritten.
    """
    result = content
    for mod in sorted(modifications, key=lambda m: m.start, reverse=True):
        result = result[:mod.start] + mod.replacement + result[mod.end:]
    return result


class ConversionPlanner:
    """
    Plans and applies text-to-call conversions for one document.

    The namespace is read live from the session at planning time.
    """

    def __init__(self, session: SessionContext, key_generator: KeyGenerator):
        self.session = session
        self.key_generator = key_generator
        self._preview: List[PreviewOverlay] = []

    # =========================================================================
    # CALL FORMS
    # =========================================================================

    def build_call(self, family: SyntaxFamily, text: str) -> str:
        """Replacement text for one occurrence of text."""
        family = SyntaxFamily(family)
        key, info = self.key_generator.key_for_text(family, text, self.session.namespace)
        fn = config.TRANSLATION_FUNCTION_NAME

        if info.variables:
            call = f"{fn}('{key}', [{', '.join(info.variables)}])"
        else:
            call = f"{fn}('{key}')"

        # Quoted literals are replaced whole, quotes included
        if is_quoted_text(text):
            return call

        if family == SyntaxFamily.EXPRESSION:
            return f"{{{call}}}"
        if family == SyntaxFamily.BRACE:
            return f"{{{{{call}}}}}"
        return call

    # =========================================================================
    # PLANNING
    # =========================================================================

    def plan(self, family: SyntaxFamily, texts: Sequence[str],
             ranges: Sequence[TextRange]) -> List[Modification]:
        """
        Build one Modification per accepted range.

        Ranges are grouped per text in caller order. A range is accepted only
        if it intersects no range accepted before it.
        """
        modifications: List[Modification] = []
        claimed: List[TextRange] = []

        for text in texts:
            for text_range in (r for r in ranges if r.text == text):
                if any(text_range.overlaps(c.start, c.end) for c in claimed):
                    logger.debug(f"Dropping overlapping range {text_range.unique_id}")
                    continue
                modifications.append(Modification(
                    start=text_range.start,
                    end=text_range.end,
                    replacement=self.build_call(family, text),
                ))
                claimed.append(text_range)

        return modifications

    def preview(self, family: SyntaxFamily, texts: Sequence[str],
                ranges: Sequence[TextRange]) -> List[PreviewOverlay]:
        """Compute overlays for the planned conversions without applying them."""
        overlays = []
        by_span = {(r.start, r.end): r for r in ranges}
        for mod in self.plan(family, texts, ranges):
            source = by_span[(mod.start, mod.end)]
            overlays.append(PreviewOverlay(mod.start, mod.end, source.text, mod.replacement))
        self._preview = overlays
        logger.info(f"Preview: {len(overlays)} conversion(s)")
        return overlays

    @property
    def current_preview(self) -> List[PreviewOverlay]:
        return list(self._preview)

    def clear_preview(self):
        self._preview = []

    # =========================================================================
    # COMMIT
    # =========================================================================

    def _finalize(self, family: SyntaxFamily, content: str,
                  planned: List[Modification]) -> List[Modification]:
        """Run the fixups, reverting any widened edit that would collide."""
        fixed = [apply_fixups(family, mod, content) for mod in planned]

        final: List[Modification] = []
        for i, (original, candidate) in enumerate(zip(planned, fixed)):
            if candidate != original:
                others = (fixed[j] for j in range(len(fixed)) if j != i)
                if any(candidate.overlaps(other) for other in others):
                    logger.debug(f"Fixup for {original} overlaps a neighbour, keeping it unwidened")
                    candidate = original
            final.append(candidate)
        return final

    def commit(self, family: SyntaxFamily, document_text: str, texts: Sequence[str],
               ranges: Sequence[TextRange]) -> ConversionResult:
        """
        Plan, fix up and apply all conversions over the original document.

        Returns:
            ConversionResult with the rewritten document text.
        """
        family = SyntaxFamily(family)
        if not texts:
            logger.info("No texts to convert")
            return ConversionResult(ResultStatus.NO_WORK, document_text)

        planned = self.plan(family, texts, ranges)
        if not planned:
            logger.info("No conversions to apply")
            return ConversionResult(ResultStatus.NO_WORK, document_text)

        final = self._finalize(family, document_text, planned)
        new_text = apply_modifications(document_text, final)
        self.clear_preview()

        logger.info(f"Applied {len(final)} conversion(s) (namespace='{self.session.namespace}')")
        return ConversionResult(ResultStatus.DONE, new_text,
                                sorted(final, key=lambda m: m.start, reverse=True))
