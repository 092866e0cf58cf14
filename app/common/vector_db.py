import logging

import chromadb
from chromadb.utils import embedding_functions
from django.conf import settings

logger = logging.getLogger(__name__)


class VectorDB:
    _instance = None

    def __init__(self, host="chromadb", port=8000, model_name="all-MiniLM-L6-v2"):
        self.client = chromadb.HttpClient(host=host, port=port)
        self.embedding_function = (
            embedding_functions.SentenceTransformerEmbeddingFunction(
                model_name=model_name
            )
        )

    @classmethod
    def get_instance(cls):
        """
        설정값(CHROMA_HOST/CHROMA_PORT)으로 싱글톤 인스턴스를 생성합니다.

        HttpClient는 생성 시점에 서버에 접속하므로 import 시점이 아니라
        처음 사용할 때 생성합니다.
        """
        if cls._instance is None:
            cls._instance = cls(
                host=getattr(settings, "CHROMA_HOST", "chromadb"),
                port=int(getattr(settings, "CHROMA_PORT", 8000)),
                model_name=getattr(
                    settings, "CHROMA_EMBEDDING_MODEL", "all-MiniLM-L6-v2"
                ),
            )
            logger.info("Connected to ChromaDB at %s", cls._instance.client)
        return cls._instance

    @classmethod
    def reset_instance(cls):
        cls._instance = None

    def get_or_create_collection(self, name):
        return self.client.get_or_create_collection(
            name=name, embedding_function=self.embedding_function
        )

    def upsert_documents(self, collection, documents, metadatas, ids):
        collection.upsert(
            documents=documents,
            metadatas=metadatas,
            ids=ids,
        )

    def delete_documents(self, collection, ids):
        # 존재하지 않는 id 삭제는 Chroma에서 no-op
        collection.delete(ids=ids)

