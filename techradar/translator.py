"""Turn a validated radar script into engine inputs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .ast import Program
from .config import RadarConfig, get_default_config
from .model import Assessment, Item, Quadrant, Trend

logger = logging.getLogger(__name__)

_COLOR_FIELDS = {
    'background': 'background',
    'grid': 'grid',
    'inactive': 'inactive',
    'text': 'backing_text',
}


@dataclass
class RadarModel:
    items: List[Item] = field(default_factory=list)
    config: RadarConfig = field(default_factory=RadarConfig)


def translate(program: Program, base: Optional[RadarConfig] = None) -> RadarModel:
    """Build items and configuration; statements override fields of ``base``."""

    config = base if base is not None else get_default_config()
    items: List[Item] = []
    for stmt in program.stmts:
        if stmt.kind == 'radar':
            config.title = stmt.data['title']
            config.area.width = float(stmt.opts.get('width', config.area.width))
            config.area.height = float(stmt.opts.get('height', config.area.height))
            config.print_layout = bool(stmt.opts.get('print', config.print_layout))
        elif stmt.kind == 'quadrant':
            config.set_quadrant_title(Quadrant.parse(stmt.data['quadrant']), stmt.data['title'])
        elif stmt.kind == 'color':
            target = stmt.data['target']
            if target in _COLOR_FIELDS:
                setattr(config.colors, _COLOR_FIELDS[target], stmt.data['value'])
            else:
                setattr(config.colors.tech, Assessment.parse(target).value, stmt.data['value'])
        elif stmt.kind == 'item':
            opts = stmt.opts
            items.append(
                Item(
                    name=stmt.data['name'],
                    active=opts.get('active', True),
                    assessment=Assessment.parse(opts['assessment']),
                    quadrant=Quadrant.parse(opts['quadrant']),
                    move=Trend.parse(opts.get('move', 'keep')),
                )
            )
        else:
            raise ValueError(f'unsupported statement kind {stmt.kind!r}')
    logger.info('Translated program into %d item(s)', len(items))
    return RadarModel(items=items, config=config)
