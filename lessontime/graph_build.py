from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

import networkx as nx

from .models import ConflictType, DayOfWeek, Lesson, TimeSlot


def build_conflict_graph(lessons: Sequence[Lesson]) -> nx.Graph:
    """Graph with one node per lesson (by list position) and an edge per clash.

    Two lessons clash when they share a (day, slot) cell and a professor or a
    classroom. The edge ``type`` is the professor clash when both apply.
    """
    G = nx.Graph()
    by_cell: Dict[Tuple[DayOfWeek, TimeSlot], List[int]] = defaultdict(list)
    for i, lesson in enumerate(lessons):
        G.add_node(i, lesson=lesson)
        by_cell[lesson.cell].append(i)
    for idxs in by_cell.values():
        for a in range(len(idxs)):
            for b in range(a + 1, len(idxs)):
                u, v = lessons[idxs[a]], lessons[idxs[b]]
                if u.professor_id == v.professor_id:
                    G.add_edge(idxs[a], idxs[b], type=ConflictType.PROFESSOR)
                elif u.classroom_number == v.classroom_number:
                    G.add_edge(idxs[a], idxs[b], type=ConflictType.CLASSROOM)
    return G
