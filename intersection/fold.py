import operator
from pyomo.common.config import ConfigBlock, ConfigValue, NonNegativeInt, In


import logging
logger = logging.getLogger(__name__)


class SetIntersector(object):
    """
    Intersect any number of groups of elements.

    Each group is materialized with set_type, which collapses duplicates,
    and the resulting sets are folded left to right with intersect. A single
    group is returned as materialized. With no groups at all the result is
    empty(), not a universal set.

    Parameters
    ----------
    set_type: callable
        Builds one set from an iterable of elements.
    intersect: callable
        Takes two sets built by set_type and returns their intersection.
    empty: callable
        Builds the result for an input with no groups. Defaults to set_type.
    """
    def __init__(self, set_type=set, intersect=operator.and_, empty=None):
        self.set_type = set_type
        self.intersect_pair = intersect
        if empty is None:
            empty = set_type
        self.empty = empty

        self.options = ConfigBlock()
        self.options.declare('smallest_first', ConfigValue(default=False, domain=In([True, False]),
                                                           doc='Materialize every group before folding and fold '
                                                               'from the smallest group up. For insertion-ordered '
                                                               'sets the result then follows the smallest group.'))
        self.options.declare('short_circuit', ConfigValue(default=False, domain=In([True, False]),
                                                          doc='Stop as soon as nothing is left in common. Groups '
                                                              'after that point are not read from the input.'))
        self.options.declare('log_level', ConfigValue(default=logging.DEBUG, domain=NonNegativeInt,
                                                      doc='Level of the log record emitted for each group'))

    def _materialize(self, groups):
        for g in groups:
            yield self.set_type(g)

    def intersect(self, groups, **kwargs):
        """
        Return the elements common to every group in groups.

        Parameters
        ----------
        groups: iterable of iterables
            Consumed in a single pass.
        options: dict
            Overrides for self.options for this call only.
        """
        options = self.options(kwargs.pop('options', dict()))
        if kwargs:
            raise TypeError('Unexpected keyword arguments: {0}'.format(', '.join(sorted(kwargs))))

        sets = self._materialize(groups)
        if options.smallest_first:
            sets = sorted(sets, key=len)

        res = None
        for ndx, s in enumerate(sets):
            if res is None:
                res = s
            else:
                res = self.intersect_pair(res, s)
            logger.log(options.log_level, 'group {0}: {1} elements in common'.format(ndx, len(res)))
            if options.short_circuit and len(res) == 0:
                logger.log(options.log_level, 'nothing in common after group {0}; stopping'.format(ndx))
                break

        if res is None:
            res = self.empty()
        return res
