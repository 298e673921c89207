from .user import User, Recruiter
from .testimonial import Testimonial
from .job import Job
from .gallery_post import GalleryPost, GalleryLike, GALLERY_TAGS
from .media import Media
from .question import Question, Answer, Tag, question_tags
from .comment import Comment
# base mixins are imported by the above as needed
