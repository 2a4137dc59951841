from .image import pick_random_image
from .vote import VoteRecord, record_vote
