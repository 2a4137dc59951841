import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
PROJECT_DIR = os.path.dirname(BASE_DIR)

# Набор картинок фиксирован на всё время жизни процесса
DOG_IMAGES_HOST = 'https://images.dog.ceo'
DEFAULT_DOG_IMAGES = tuple(f'{DOG_IMAGES_HOST}/breeds/{path}' for path in (
    'golden-retriever/20200705-130717.jpg',
    'labrador/n02099712_8932.jpg',
    'husky/n02110185_5821.jpg',
    'beagle/n02088364_17206.jpg',
    'corgi-cardigan/n02113186_8119.jpg',
    'poodle-standard/n02113799_5049.jpg',
    'bulldog-french/n02108915_7613.jpg',
    'shepherd-german/n02106662_26664.jpg',
    'retriever-chesapeake/n02099849_2621.jpg',
    'spaniel-cocker/n02102318_4150.jpg',
))

POPUP_MODES = ('always', 'bad-only')


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")
    WTF_CSRF_SECRET_KEY = SECRET_KEY

    PORT = int(os.environ.get("PORT", "3000"))
    VOTES_LOG = os.environ.get("VOTES_LOG", os.path.join(PROJECT_DIR, 'votes.log'))
    DOG_IMAGES = DEFAULT_DOG_IMAGES
    VOTE_POPUP_MODE = os.environ.get("VOTE_POPUP_MODE", "always")  # always | bad-only

    FORCE_HTTPS = os.environ.get("FORCE_HTTPS", "").lower() in ('1', 'true', 'yes')
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


class TestingConfig(Config):
    TESTING = True
    FORCE_HTTPS = False
