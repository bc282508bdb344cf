"""Database seeder: recreates the schema and fills it with articles and comments."""
import argparse
import asyncio
import logging
import random
import time

from blog_api.database import Base, async_session, engine
from blog_api.logging_config import setup_logging
from blog_api.models import Article, Comment, utcnow

logger = logging.getLogger("seed")

TOPICS = ["python", "fastapi", "postgresql", "docker", "testing", "performance",
          "security", "asyncio", "sqlalchemy", "rest-api"]


async def seed(num_articles: int, max_comments: int) -> None:
    logger.info("Seeding %d articles with up to %d comments each", num_articles, max_comments)
    start = time.perf_counter()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    total_comments = 0
    async with async_session() as session:
        batch_size = 500
        for batch_start in range(0, num_articles, batch_size):
            batch_end = min(batch_start + batch_size, num_articles)
            articles = []
            for i in range(batch_start, batch_end):
                now = utcnow()
                article = Article(
                    title=f"Article {i}: notes on {random.choice(TOPICS)}",
                    content=f"This is the full content of article {i}. " * 20,
                    created_at=now,
                    updated_at=now,
                )
                session.add(article)
                articles.append(article)
            # Flush to get the article ids before adding their comments.
            await session.flush()

            for article in articles:
                for n in range(random.randint(0, max_comments)):
                    session.add(Comment(
                        content=f"Comment {n} on article {article.id}.",
                        article_id=article.id,
                        created_at=utcnow(),
                    ))
                    total_comments += 1
            await session.flush()
            logger.info("Batch %d-%d: articles created", batch_start, batch_end)

        await session.commit()

    await engine.dispose()
    elapsed = time.perf_counter() - start
    logger.info(
        "Seeding complete in %.1fs: %d articles, %d comments",
        elapsed, num_articles, total_comments,
    )


def main():
    parser = argparse.ArgumentParser(description="Seed the blog database")
    parser.add_argument("--articles", type=int, default=100, help="Number of articles")
    parser.add_argument("--max-comments", type=int, default=5, help="Max comments per article")
    args = parser.parse_args()
    setup_logging()
    asyncio.run(seed(args.articles, args.max_comments))


if __name__ == "__main__":
    main()
