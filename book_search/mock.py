"""Canned Google Books response for offline use."""
import json
from typing import Dict, Any

MOCK_RESPONSE_JSON = """{"kind":"books#volumes","totalItems":1,"items":[{"kind":"books#volume","id":"Wx1dLwEACAAJ","etag":"fb5xInnoWtI","selfLink":"https://www.googleapis.com/books/v1/volumes/Wx1dLwEACAAJ","volumeInfo":{"title":"リーダブルコード","subtitle":"より良いコードを書くためのシンプルで実践的なテクニック","authors":["DustinBoswell","TrevorFoucher"],"publisher":"O'ReillyMedia,Inc.","publishedDate":"2012-06","description":"読んでわかるコードの重要性と方法について解説","industryIdentifiers":[{"type":"ISBN_10","identifier":"4873115655"},{"type":"ISBN_13","identifier":"9784873115658"}],"readingModes":{"text":false,"image":false},"pageCount":237,"printType":"BOOK","averageRating":5.0,"ratingsCount":1,"maturityRating":"NOT_MATURE","allowAnonLogging":false,"contentVersion":"preview-1.0.0","imageLinks":{"smallThumbnail":"http://books.google.com/books/content?id=Wx1dLwEACAAJ&printsec=frontcover&img=1&zoom=5&source=gbs_api","thumbnail":"http://books.google.com/books/content?id=Wx1dLwEACAAJ&printsec=frontcover&img=1&zoom=1&source=gbs_api"},"language":"ja","previewLink":"http://books.google.co.jp/books?id=Wx1dLwEACAAJ&dq=isbn:9784873115658&hl=&cd=1&source=gbs_api","infoLink":"http://books.google.co.jp/books?id=Wx1dLwEACAAJ&dq=isbn:9784873115658&hl=&source=gbs_api","canonicalVolumeLink":"https://books.google.com/books/about/%E3%83%AA%E3%83%BC%E3%83%80%E3%83%96%E3%83%AB%E3%82%B3%E3%83%BC%E3%83%89.html?hl=&id=Wx1dLwEACAAJ"},"saleInfo":{"country":"JP","saleability":"NOT_FOR_SALE","isEbook":false},"accessInfo":{"country":"JP","viewability":"NO_PAGES","embeddable":false,"publicDomain":false,"textToSpeechPermission":"ALLOWED","epub":{"isAvailable":false},"pdf":{"isAvailable":false},"webReaderLink":"http://play.google.com/books/reader?id=Wx1dLwEACAAJ&hl=&printsec=frontcover&source=gbs_api","accessViewStatus":"NONE","quoteSharingAllowed":false},"searchInfo":{"textSnippet":"読んでわかるコードの重要性と方法について解説"}}]}"""


def mock_response(search_term: str) -> Dict[str, Any]:
    """
    Return the canned response regardless of the search term.

    A fresh copy is decoded on every call so callers may mutate it.
    """
    return json.loads(MOCK_RESPONSE_JSON)


async def async_mock_response(search_term: str) -> Dict[str, Any]:
    """Awaitable variant of mock_response."""
    return mock_response(search_term)
