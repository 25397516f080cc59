"""Prompt templates for the Gemini-backed routes."""

ATS_PROMPT = """
You are an ATS (Applicant Tracking System) expert.

Analyze this resume against the job description for ATS compatibility.

RESUME:
\"\"\"{resume_text}\"\"\"

JOB DESCRIPTION:
\"\"\"{job_description}\"\"\"

Respond in the following JSON format:
{{
  "score": {{
    "overall": <number 0-100>,
    "sections": {{
      "formatting": <number 0-100>,
      "keywords": <number 0-100>,
      "experience": <number 0-100>,
      "education": <number 0-100>,
      "skills": <number 0-100>
    }}
  }},
  "keywords": {{
    "matched": ["keyword1", "keyword2"],
    "missing": ["missing1", "missing2"],
    "suggestions": ["suggestion1", "suggestion2"]
  }},
  "improvements": ["Specific improvement suggestion 1", "..."],
  "strengths": ["Strength 1 found in resume", "..."],
  "recommendations": ["Actionable recommendation 1", "..."]
}}

Analysis criteria:
1. Formatting: ATS-friendly formatting (no tables, images, complex layouts)
2. Keywords: job description keywords present in the resume
3. Experience: relevance of work experience to the job requirements
4. Education: educational background alignment
5. Skills: technical and soft skills matching

Give specific, actionable feedback. Be thorough in keyword analysis.
Return only valid JSON without any additional text.
"""

RESUME_SCHEMA = """{
  "personalInfo": {
    "name": "",
    "email": "",
    "phone": "",
    "location": "",
    "linkedin": "",
    "portfolio": ""
  },
  "summary": "",
  "experience": [
    {"id": "unique_id", "company": "", "position": "", "duration": "", "description": ""}
  ],
  "education": [
    {"id": "unique_id", "institution": "", "degree": "", "duration": "", "gpa": ""}
  ],
  "skills": ["skill1", "skill2"],
  "projects": [
    {"id": "unique_id", "name": "", "description": "", "technologies": "", "link": ""}
  ]
}"""

PARSE_RESUME_PROMPT = """
Parse the following resume text and extract structured information.
Return a JSON object with the following structure:
{schema}

RESUME TEXT:
\"\"\"{resume_text}\"\"\"

Extract all available information and structure it properly.
Generate unique IDs for each experience, education, and project entry.
Return only valid JSON.
"""

TAILOR_RESUME_PROMPT = """
You are an expert resume writer. Tailor the following resume to match the job description.

Focus on:
1. Optimizing the professional summary to align with the job requirements
2. Highlighting relevant experience and achievements
3. Emphasizing matching skills
4. Adjusting project descriptions to show relevant experience
5. Using keywords from the job description naturally, but DO NOT invent tools or roles

CURRENT RESUME DATA:
{resume_json}

JOB DESCRIPTION:
\"\"\"{job_description}\"\"\"

Return the tailored resume in the same JSON structure as the input, with
optimized content. Keep all the original structure and IDs intact.
Return only valid JSON.
"""

TONE_INSTRUCTIONS = {
    "professional": "Use a professional, formal tone that is respectful and business-appropriate.",
    "enthusiastic": "Use an energetic, passionate tone that shows excitement and motivation.",
    "creative": "Use a unique, innovative approach with creative language while maintaining professionalism.",
    "formal": "Use a traditional, conservative tone with formal language and structure.",
}

COVER_LETTER_PROMPT = """
You are an expert cover letter writer.

CANDIDATE:
- Name: {name}
- Email: {email}
- Phone: {phone}
- Address: {address}

JOB:
- Job Title: {job_title}
- Company Name: {company_name}
- Job Description: {job_description}

ADDITIONAL INFORMATION:
- Relevant Experience: {experience}
- Key Skills: {skills}
- Notable Achievements: {achievements}

WRITING STYLE: {tone_instruction}

TASK:
Write a compelling cover letter that:
1. Starts with proper contact information and date
2. Addresses the hiring manager professionally
3. Has a strong opening paragraph
4. Highlights relevant experience and skills that match the job requirements
5. Showcases specific achievements
6. Demonstrates knowledge about the company (if a job description is provided)
7. Explains why the candidate fits the role
8. Ends with a professional closing and call to action
9. Keeps the specified tone throughout
10. Is approximately 3-4 paragraphs long

Do NOT invent experience.
Output ONLY the letter text.
"""
