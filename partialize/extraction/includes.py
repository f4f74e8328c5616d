# partialize/extraction/includes.py

import re
from typing import Dict, List

import networkx as nx

from config.config import config
from partialize.exceptions import IncludeCycleError, MissingPartialError
from partialize.utils.logging import Logger

logger = Logger.get_logger("IncludeGraphLogger", config.paths.log_dir / config.logging.extractor_log)


def include_pattern(partials_dir: str = None) -> re.Pattern:
    partials_dir = partials_dir or config.files.partials_dir
    return re.compile(r"<%-\s*include\('" + re.escape(partials_dir) + r"/([^']+)'\)\s*%>")


def find_includes(content: str, partials_dir: str = None) -> List[str]:
    return include_pattern(partials_dir).findall(content)


class IncludeGraph:
    """
    Directed graph of which partial includes which.
    """
    def __init__(self, partials: Dict[str, str], partials_dir: str = None):
        self.partials = partials
        self.partials_dir = partials_dir
        self.graph = nx.DiGraph()
        for name, body in partials.items():
            self.graph.add_node(name)
            for included in find_includes(body, partials_dir):
                self.graph.add_edge(name, included)

    def validate(self) -> bool:
        """Log structural problems; True when the graph can be inlined."""
        valid = True
        missing = [name for name in self.graph.nodes if name not in self.partials]
        if missing:
            logger.warning(f"Includes reference {len(missing)} unknown partials: {sorted(missing)}")
            valid = False

        if not nx.is_directed_acyclic_graph(self.graph):
            logger.warning("Include graph contains cycles.")
            valid = False

        unused = [name for name in self.graph.nodes if self.graph.in_degree(name) == 0]
        logger.debug(f"{len(unused)} partials are only included from the main document.")
        return valid

    def expansion_order(self) -> List[str]:
        """Partials ordered so every include is expanded before its includer."""
        try:
            return list(reversed(list(nx.topological_sort(self.graph))))
        except nx.NetworkXUnfeasible as e:
            raise IncludeCycleError("Partials include each other in a cycle") from e

    def expand(self) -> Dict[str, str]:
        """Fully inlined body of every partial."""
        pattern = include_pattern(self.partials_dir)
        expanded: Dict[str, str] = {}

        def substitute(match: re.Match) -> str:
            name = match.group(1)
            if name not in expanded:
                raise MissingPartialError(name)
            return expanded[name]

        for name in self.expansion_order():
            if name not in self.partials:
                raise MissingPartialError(name)
            expanded[name] = pattern.sub(substitute, self.partials[name])
        return expanded


def inline_includes(document: str, partials: Dict[str, str], partials_dir: str = None) -> str:
    """Replace every include directive in document with the partial's full markup."""
    expanded = IncludeGraph(partials, partials_dir).expand()

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in expanded:
            raise MissingPartialError(name)
        return expanded[name]

    return include_pattern(partials_dir).sub(substitute, document)
