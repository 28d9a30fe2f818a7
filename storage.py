import os
import boto3
from botocore.exceptions import BotoCoreError, ClientError
from sqlalchemy.exc import SQLAlchemyError

from database import SessionLocal, KeyValue
from logging_setup import get_logger

logger = get_logger("expense_tracker.storage")

# Environment variables
S3_BUCKET = os.environ.get("S3_BUCKET")
S3_PREFIX = os.environ.get("S3_PREFIX", "expense_data")
AWS_REGION = os.environ.get("AWS_REGION", "us-east-1")

def get_s3_client():
    return boto3.client("s3", region_name=AWS_REGION)

def _s3_key(key: str) -> str:
    return f"{S3_PREFIX}/{key}.json"

def save_text(key: str, text: str) -> bool:
    """
    Overwrites the named blob in S3 or the local database.
    Returns False instead of raising when the backend refuses the write.
    """
    if S3_BUCKET:
        s3 = get_s3_client()
        try:
            s3.put_object(Bucket=S3_BUCKET, Key=_s3_key(key), Body=text.encode("utf-8"))
            return True
        except (BotoCoreError, ClientError) as e:
            logger.error("S3 upload error for %s: %s", key, e)
            return False

    db = SessionLocal()
    try:
        row = db.get(KeyValue, key)
        if row is None:
            db.add(KeyValue(key=key, value=text))
        else:
            row.value = text
        db.commit()
        return True
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Database write error for %s: %s", key, e)
        return False
    finally:
        db.close()

def load_text(key: str) -> str | None:
    """
    Reads the named blob, or None when it has never been written.
    """
    if S3_BUCKET:
        s3 = get_s3_client()
        try:
            obj = s3.get_object(Bucket=S3_BUCKET, Key=_s3_key(key))
        except s3.exceptions.NoSuchKey:
            return None
        return obj["Body"].read().decode("utf-8")

    db = SessionLocal()
    try:
        row = db.get(KeyValue, key)
        return row.value if row is not None else None
    finally:
        db.close()
