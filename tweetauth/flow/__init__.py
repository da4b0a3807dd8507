from flask import Blueprint

flow = Blueprint('flow', __name__)

from tweetauth.flow import views, core
