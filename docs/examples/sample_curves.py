from pillreveal import PopupItem
import numpy as np

item = PopupItem()
item.measure(240, 64)
opening = item.create_open_animation(is_container_above_icon=False,
                                     pivot_left=True)
opening.update(0.3)

closing = item.create_close_animation(is_container_above_icon=False,
                                      pivot_left=True)
frames = closing.sample_array(np.linspace(0, 1, 11))
print('close lasts %.3fs' % closing.duration)
for row in frames:
    print('progress=%.3f width=%6.2f ty=%6.2f' % (
        row['progress'], row['right'] - row['left'], row['ty']))
