class GlacierError(Exception):
    pass


class ValidationError(GlacierError):
    pass


class NotFoundError(GlacierError):
    pass


class BlogNotFoundError(NotFoundError):
    def __init__(self, blog_id: str):
        self.blog_id = blog_id
        super().__init__(f"Blog {blog_id} not found")


class ExternalServiceError(GlacierError):
    pass


class NewsFetchError(ExternalServiceError):
    pass


class StorageError(GlacierError):
    pass


class MediaStorageError(StorageError):
    pass
