"""Configuration classes for flownet components."""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Defaults used by the max-flow entry points and the CLI."""

    # Engine used by max_flow() and friends when no algorithm is given
    default_algorithm: str = "edmonds_karp"

    # Engine used by min_cut() when no algorithm is given
    min_cut_algorithm: str = "edmonds_karp"

    # Separator between vertices in formatted paths
    path_arrow: str = " -> "

    # Format of a single edge in reported cuts
    edge_format: str = "({u}, {v})"

    def format_path(self, amount: int, vertices) -> str:
        """Render a path as ``"amount: v0 -> v1 -> ... -> vk"``."""
        return f"{amount}: " + self.path_arrow.join(str(v) for v in vertices)

    def format_edge(self, u: int, v: int) -> str:
        """Render an ordered vertex pair as ``"(u, v)"``."""
        return self.edge_format.format(u=u, v=v)


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
