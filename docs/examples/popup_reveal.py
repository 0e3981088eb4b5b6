from pillreveal import PopupItem
from time import sleep

item = PopupItem()
item.measure(200, 80)

opening = item.create_open_animation(is_container_above_icon=True,
                                     pivot_left=False)
for frame in opening.frames():
    print('open  scale=%.2f translate=(%6.2f, %6.2f) clip=%r' % (
        frame.scale, frame.translation.x, frame.translation.y,
        frame.outline.rect))
    # Interrupt the open animation part way through
    if item.open_progress > 0.6:
        break
    sleep(1 / opening.fps)

closing = item.create_close_animation(is_container_above_icon=True,
                                      pivot_left=False)
for frame in closing.frames():
    print('close scale=%.2f translate=(%6.2f, %6.2f) clip=%r' % (
        frame.scale, frame.translation.x, frame.translation.y,
        frame.outline.rect))
    sleep(1 / closing.fps)
print(item.state)
