import logging
import numpy as np
import intersection
from intersection import hash_set, btree_set, SetKind


logging.basicConfig(level=logging.DEBUG)

words = 'hello,world,common'.split(',')
print('*********************************')
print('Common letters (hash set)')
print('*********************************')
print(hash_set.intersection(words))

words = 'harry,hairy,happy'.split(',')
print('*********************************')
print('Common letters (sorted set)')
print('*********************************')
print(btree_set.intersection(words))

print('*********************************')
print('Common multiples (arrays)')
print('*********************************')
groups = [np.arange(0, 100, k) for k in (2, 3, 5)]
res = intersection.intersection(groups, kind=SetKind.ARRAY, options={'smallest_first': True})
print(res)
