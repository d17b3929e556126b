"""
Image operations module.

This module maps the image endpoints onto client methods. Uploads are the
only requests sent as multipart form data instead of JSON.
"""

from typing import Optional

from ..constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..models import DeleteResponse, ImageResponse, ImagesResponse
from .utils import UploadSource, prepare_upload


class ImageOperations:
    """Image listing, upload, AI generation and deletion."""

    def get_images(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
        search: Optional[str] = None,
        publication_id: Optional[str] = None,
    ) -> ImagesResponse:
        params = self._list_params(page, limit, search=search, publicationId=publication_id)
        return self._transport.request("GET", "/images", params=params)

    def get_image(self, image_id: str) -> ImageResponse:
        return self._transport.request("GET", f"/images/{image_id}")

    def upload_image(
        self,
        file: UploadSource,
        publication_id: Optional[str] = None,
        filename: str = "image.jpg",
    ) -> ImageResponse:
        """
        Upload an image as multipart form data.

        Args:
            file: Raw bytes, a filesystem path, or a binary file object
            publication_id: Optional publication to attach the image to
            filename: Name used for raw bytes without a name of their own

        Returns:
            Envelope with the stored image
        """
        name, content = prepare_upload(file, filename)
        data = {"publicationId": publication_id} if publication_id else None
        return self._transport.request(
            "POST",
            "/images/upload",
            files={"image": (name, content)},
            data=data,
        )

    def generate_image(
        self,
        prompt: str,
        style: str = "realistic",
        size: str = "1024x1024",
    ) -> ImageResponse:
        return self._transport.request(
            "POST",
            "/images/generate",
            json_body={"prompt": prompt, "style": style, "size": size},
        )

    def delete_image(self, image_id: str) -> DeleteResponse:
        return self._transport.request("DELETE", f"/images/{image_id}")
