"""
简历服务

- upload_resume: 校验文件类型，上传到 resumes bucket，把公开链接写入用户资料
- analyze_resume: 生成分析结果并持久化，同时触发职位推荐的重新生成
- get_latest_analysis: 读取最新一次分析
"""

import logging
import time
from typing import Callable, Optional

from pydantic import BaseModel

from futureu.backend.client import BackendClient
from futureu.backend.errors import BACKEND_ERRORS, backend_error_message
from futureu.models.analysis import ResumeAnalysis
from futureu.repositories.analysis_repository import AnalysisRepository
from futureu.repositories.profile_repository import ProfileRepository
from futureu.services.analyzers import MockResumeAnalyzer, ResumeAnalyzer
from futureu.services.base import BaseService, service_call
from futureu.services.errors import NotFound, ValidationError
from futureu.services.job_service import JobService

logger = logging.getLogger(__name__)

RESUME_BUCKET = "resumes"

# 允许的 MIME 类型 -> 存储扩展名
ALLOWED_RESUME_TYPES = {
    "application/pdf": "pdf",
    "application/msword": "doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
}

# 未提供 MIME 类型时按扩展名推断
_EXTENSION_TYPES = {ext: content_type for content_type, ext in ALLOWED_RESUME_TYPES.items()}


class ResumeFile(BaseModel):
    """待上传的简历文件"""
    filename: str
    content_type: Optional[str] = None
    data: bytes

    def resolved_content_type(self) -> Optional[str]:
        """优先使用声明的 MIME 类型，缺失时按文件扩展名推断"""
        if self.content_type:
            return self.content_type.split(";")[0].strip().lower()
        if "." not in self.filename:
            return None
        ext = self.filename.rsplit(".", 1)[-1].lower()
        return _EXTENSION_TYPES.get(ext)


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class ResumeService(BaseService):
    """简历服务"""

    def __init__(
        self,
        backend: BackendClient,
        analyzer: Optional[ResumeAnalyzer] = None,
        job_service: Optional[JobService] = None,
        clock: Optional[Callable[[], int]] = None
    ):
        """
        Args:
            backend: 后端客户端
            analyzer: 简历分析实现，默认 MockResumeAnalyzer
            job_service: 分析完成后用于重新生成职位推荐
            clock: 返回毫秒时间戳的函数，用于生成上传路径
        """
        super().__init__(backend)
        self.analyzer = analyzer or MockResumeAnalyzer(backend.settings.mock_delay_seconds)
        self.job_service = job_service or JobService(backend)
        self._clock = clock or _epoch_millis

    @staticmethod
    def validate_file(file: ResumeFile) -> str:
        """
        校验简历文件

        Returns:
            存储扩展名

        Raises:
            ValidationError: 不是 PDF 或 Word 文件，或文件为空
        """
        content_type = file.resolved_content_type()
        if content_type not in ALLOWED_RESUME_TYPES:
            raise ValidationError("请上传 PDF 或 Word 格式的文件")
        if not file.data:
            raise ValidationError("上传的文件为空")
        return ALLOWED_RESUME_TYPES[content_type]

    @service_call("简历上传")
    def upload_resume(self, file: ResumeFile) -> str:
        """
        上传简历并写入用户资料

        路径为 "<身份>/<毫秒时间戳>.<扩展名>"，上传不覆盖已存在的对象。
        资料写入失败时删除已上传的文件，避免留下无人引用的对象。

        Args:
            file: 简历文件

        Returns:
            简历公开链接
        """
        user_id = self._require_user_id()
        ext = self.validate_file(file)

        path = f"{user_id}/{self._clock()}.{ext}"
        bucket = self.backend.storage.from_(RESUME_BUCKET)
        bucket.upload(
            path,
            file.data,
            file_options={"content-type": file.resolved_content_type(), "upsert": "false"}
        )
        public_url = bucket.get_public_url(path)

        try:
            profile = ProfileRepository(self.backend).update_fields(user_id, {"resume_url": public_url})
            if profile is None:
                raise NotFound("用户资料不存在")
        except (NotFound,) + BACKEND_ERRORS:
            logger.warning("[ResumeService] 资料写入失败，删除已上传文件 %s", path)
            self._remove_uploaded(bucket, path)
            raise

        logger.info("[ResumeService] 简历上传成功: %s", public_url)
        return public_url

    @staticmethod
    def _remove_uploaded(bucket, path: str) -> None:
        """删除已上传的文件，失败只记录日志，由调用方继续抛出原始错误"""
        try:
            bucket.remove([path])
        except BACKEND_ERRORS as e:
            logger.error("[ResumeService] 删除已上传文件失败 %s: %s", path, backend_error_message(e))

    @service_call("简历分析")
    def analyze_resume(self, resume_url: str) -> ResumeAnalysis:
        """
        分析简历并保存结果，随后为同一身份重新生成职位推荐

        职位推荐生成失败只记录日志，不影响分析结果的返回

        Args:
            resume_url: 已上传简历的公开链接

        Returns:
            新创建的 ResumeAnalysis 对象
        """
        user_id = self._require_user_id()
        if not resume_url or not resume_url.strip():
            raise ValidationError("请先上传简历")

        payload = self.analyzer.analyze(user_id, resume_url)

        analysis = AnalysisRepository(self.backend).create(
            user_id=user_id,
            resume_url=resume_url,
            payload=payload.model_dump()
        )

        result = self.job_service.generate_recommendations(user_id)
        if not result.ok:
            logger.warning("[ResumeService] 职位推荐生成失败: %s", result.error_message)

        return analysis

    @service_call("获取简历分析")
    def get_latest_analysis(self) -> Optional[ResumeAnalysis]:
        """
        获取当前用户最新的分析结果

        Returns:
            ResumeAnalysis 对象，尚未分析过则为 None
        """
        user_id = self._require_user_id()
        return AnalysisRepository(self.backend).get_latest_by_user(user_id)
