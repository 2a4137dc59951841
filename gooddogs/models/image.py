import random


def pick_random_image(images, rng=random):
    """Возвращает случайную картинку из фиксированного набора.

    Выбор равномерный, между вызовами ничего не запоминается,
    повторы подряд допустимы.
    """
    return rng.choice(images)
