#!/usr/bin/env python
import sys
from typing import List, Tuple

import pikepdf

import polysimpl as simpl


class PathSimplifier:
    """
    A stateful rewriter that buffers straight path runs (m, l) and simplifies them.
    """

    def __init__(self, tolerance=2.0, algorithm="douglas_peucker"):
        self.algorithm = algorithm
        self.options = simpl.SimplifyOptions(tolerance=tolerance)
        self.buffer: List[Tuple[float, float]] = []
        self.points_in = 0
        self.points_out = 0

    def rewrite(self, instructions):
        """Yields the instructions with every m/l run simplified."""
        for instruction in instructions:
            if isinstance(instruction, pikepdf.ContentStreamInlineImage):
                yield from self._flush_buffer()
                yield instruction
                continue

            operands, op = instruction.operands, str(instruction.operator)

            if op == "m":
                yield from self._flush_buffer()
                self.buffer = [self._point(operands)]
            elif op == "l" and self.buffer:
                self.buffer.append(self._point(operands))
            else:
                yield from self._flush_buffer()
                yield instruction

        yield from self._flush_buffer()

    @staticmethod
    def _point(operands) -> Tuple[float, float]:
        return float(operands[0]), float(operands[1])

    def _flush_buffer(self):
        """Simplifies the buffered path and generates new PDF ops."""
        if not self.buffer:
            return

        simplified = simpl.simplify(self.buffer, self.algorithm, self.options)
        self.points_in += len(self.buffer)
        self.points_out += len(simplified)
        self.buffer = []

        # First point is always 'm', the rest are 'l'
        yield pikepdf.ContentStreamInstruction(
            [float(v) for v in simplified[0]], pikepdf.Operator("m")
        )
        for x, y in simplified[1:]:
            yield pikepdf.ContentStreamInstruction([float(x), float(y)], pikepdf.Operator("l"))


def simplify_page(pdf: pikepdf.Pdf, page: pikepdf.Page, simplifier: PathSimplifier) -> None:
    instructions = pikepdf.parse_content_stream(page)
    new_content = pikepdf.unparse_content_stream(list(simplifier.rewrite(instructions)))
    page.Contents = pdf.make_stream(new_content)


def main():
    if len(sys.argv) < 3:
        print(f"Usage: {sys.argv[0]} input.pdf output.pdf [tolerance]")
        sys.exit(1)

    tolerance = float(sys.argv[3]) if len(sys.argv) > 3 else 2.0
    simplifier = PathSimplifier(tolerance)

    with pikepdf.open(sys.argv[1]) as pdf:
        for page in pdf.pages:
            simplify_page(pdf, page, simplifier)
        pdf.save(sys.argv[2])

    print(f"Path points: {simplifier.points_in} -> {simplifier.points_out}")


if __name__ == "__main__":
    main()
