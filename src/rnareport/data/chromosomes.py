"""GRCh38 chromosome reference table used by the circular genome plot.

Order determines both the clockwise layout order and the drawing order.
"""

from rnareport.genome.layout import Chromosome


GRCH38_CHROMOSOMES: tuple[Chromosome, ...] = (
    Chromosome("1", 248956422, "#264653"),
    Chromosome("2", 242193529, "#287271"),
    Chromosome("3", 198295559, "#2a9d8f"),
    Chromosome("4", 190214555, "#8ab17d"),
    Chromosome("5", 181538259, "#e9c46a"),
    Chromosome("6", 170805979, "#f4a261"),
    Chromosome("7", 159345973, "#ee8959"),
    Chromosome("8", 145138636, "#e76f51"),
    Chromosome("9", 138394717, "#d62828"),
    Chromosome("10", 133797422, "#9b2226"),
    Chromosome("11", 135086622, "#6d597a"),
    Chromosome("12", 133275309, "#5f4b66"),
    Chromosome("13", 114364328, "#355070"),
    Chromosome("14", 107043718, "#1d3557"),
    Chromosome("15", 101991189, "#457b9d"),
    Chromosome("16", 90338345, "#4a8fe7"),
    Chromosome("17", 83257441, "#5390d9"),
    Chromosome("18", 80373285, "#7400b8"),
    Chromosome("19", 58617616, "#6930c3"),
    Chromosome("20", 64444167, "#5e60ce"),
    Chromosome("21", 46709983, "#5390d9"),
    Chromosome("22", 50818468, "#4ea8de"),
    Chromosome("X", 156040895, "#e63946"),
    Chromosome("Y", 57227415, "#f4a261"),
)
